from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'funds'

router = SimpleRouter()
router.register(r'bank-accounts', views.BankAccountViewSet, basename='bank-account')
router.register(r'expenses', views.ExpenseViewSet, basename='expense')
router.register(r'payments', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # GET/POST               /api/bank-accounts/
    # GET/PUT/PATCH/DELETE   /api/bank-accounts/{id}/
    # GET/POST               /api/expenses/
    # GET/PUT/PATCH/DELETE   /api/expenses/{id}/
    # GET                    /api/expenses/user/{user_id}/
    # GET/POST               /api/payments/
    # GET/PUT/PATCH/DELETE   /api/payments/{id}/
    # GET                    /api/payments/user/{user_id}/
    path('', include(router.urls)),
]
