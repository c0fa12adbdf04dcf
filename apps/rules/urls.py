from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'rules'

router = SimpleRouter()
router.register(r'rules', views.RuleViewSet, basename='rule')
router.register(r'rule-violations', views.RuleViolationViewSet, basename='violation')

urlpatterns = [
    # GET/POST               /api/rules/
    # GET/PUT/PATCH/DELETE   /api/rules/{id}/
    # GET/POST               /api/rule-violations/
    # GET/PUT/PATCH/DELETE   /api/rule-violations/{id}/
    # GET                    /api/rule-violations/violator/{user_id}/
    # GET                    /api/rule-violations/rule/{rule_id}/
    path('', include(router.urls)),
]
