from rest_framework import permissions


class IsCardOwner(permissions.BasePermission):
    """
    Permission: User must own the discount card.
    """

    message = 'Only the card owner can do this.'

    def has_object_permission(self, request, view, obj):
        # obj is a DiscountCard instance
        return obj.is_owner(request.user)
