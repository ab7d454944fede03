from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'lists'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.ShoppingListViewSet, basename='shopping-list')

urlpatterns = [
    # ShoppingList ViewSet routes
    # GET    /api/lists/              - Lists visible to the user
    # POST   /api/lists/              - Create list
    # GET    /api/lists/{id}/         - List with items
    # PUT    /api/lists/{id}/         - Rename / toggle is_shared (owner)
    # PATCH  /api/lists/{id}/         - Partial update (owner)
    # DELETE /api/lists/{id}/         - Delete list (owner)

    # Custom list actions
    # GET    /api/lists/{id}/shares/                  - Specific shares (owner)
    # PUT    /api/lists/{id}/shares/                  - Replace specific shares (owner)
    # POST   /api/lists/{id}/items/                   - Add catalog item
    # PATCH  /api/lists/{id}/items/{item_id}/         - Update quantity/comment
    # DELETE /api/lists/{id}/items/{item_id}/         - Remove entry
    # POST   /api/lists/{id}/items/{item_id}/toggle/  - Check/uncheck entry
    path('', include(router.urls)),
]
