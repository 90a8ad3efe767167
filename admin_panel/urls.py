from django.urls import path
from . import views

urlpatterns = [
    # Dashboard
    path('', views.admin_dashboard, name='admin-dashboard'),

    # Analytics
    path('analytics/', views.admin_analytics, name='admin-analytics'),

    # API Endpoints
    path('api/analytics/revenue/', views.api_revenue_data,
         name='admin-api-revenue-data'),
    path('api/analytics/distribution/', views.api_distribution_data,
         name='admin-api-distribution-data'),
]
