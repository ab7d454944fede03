from rest_framework import permissions


class IsListOwner(permissions.BasePermission):
    """
    Permission: User must own the shopping list.
    """

    message = 'Only the list owner can do this.'

    def has_object_permission(self, request, view, obj):
        # obj is a ShoppingList instance
        return obj.is_owner(request.user)
