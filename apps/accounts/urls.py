from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # User profile
    path('me/', views.get_current_user, name='current-user'),
    path('me/name/', views.update_name, name='update-name'),
    path('me/email/', views.update_email, name='update-email'),
    path('me/password/', views.update_password, name='change-password'),

    # Share picker
    path('users/', views.users, name='user-list'),
]
