from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('auth/signup/', views.signup, name='signup'),
    path('auth/signin/', views.signin, name='signin'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('auth/me/', views.get_current_user, name='current-user'),

    # Password reset
    path('auth/password-reset/', views.request_password_reset, name='password-reset'),
    path('auth/password-reset/confirm/', views.confirm_password_reset, name='password-reset-confirm'),

    # User profile
    path('users/<uuid:pk>/', views.update_user, name='user-detail'),
]
