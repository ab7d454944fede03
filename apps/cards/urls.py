from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'cards'

router = DefaultRouter()
router.register(r'', views.DiscountCardViewSet, basename='card')

urlpatterns = [
    # POST   /api/cards/resolve/              - Active card by identifier value
    # PUT    /api/cards/identifiers/{id}/     - Replace identifier (multipart)
    # DELETE /api/cards/identifiers/{id}/     - Remove identifier
    path('resolve/', views.resolve, name='card-resolve'),
    path('identifiers/<uuid:identifier_id>/', views.identifier_detail, name='identifier-detail'),

    # DiscountCard ViewSet routes
    # GET    /api/cards/                      - User's cards
    # POST   /api/cards/                      - Create card
    # GET    /api/cards/{id}/                 - Card with identifiers
    # PUT    /api/cards/{id}/                 - Rename / change comment
    # DELETE /api/cards/{id}/                 - Delete card
    # POST   /api/cards/{id}/toggle/          - Activate / deactivate
    # POST   /api/cards/{id}/identifiers/     - Add identifier (multipart)
    path('', include(router.urls)),
]
