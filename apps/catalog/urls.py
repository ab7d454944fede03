from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'categories', views.CategoryViewSet, basename='category')
router.register(r'units', views.UnitViewSet, basename='unit')
router.register(r'items', views.ItemViewSet, basename='item')

urlpatterns = [
    # GET    /api/categories/          - Categories ordered by name
    # POST   /api/categories/          - Create category
    # PUT    /api/categories/{id}/     - Rename / change comment
    # DELETE /api/categories/{id}/     - Delete, items move to the fallback category
    # same shape for /api/units/ and /api/items/ (?search=)
    path('', include(router.urls)),
]
