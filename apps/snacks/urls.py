from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'snacks'

router = SimpleRouter()
router.register(r'snacks', views.SnackViewSet, basename='snack')

urlpatterns = [
    # GET/POST               /api/snacks/
    # GET/PUT/PATCH/DELETE   /api/snacks/{id}/
    # GET                    /api/snacks/date-range/?start_date=&end_date=
    path('', include(router.urls)),
]
