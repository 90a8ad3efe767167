# RPA/urls.py
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from accounts.views import login_page, logout_view

# Import template views directly
from restaurants.template_views import (
    restaurant_list, restaurant_detail, restaurant_create, restaurant_edit,
    restaurant_confirm
)
from menu.template_views import (
    category_list, category_create, category_edit, category_toggle,
    category_delete
)

urlpatterns = [
    # ============ PUBLIC PAGES ============
    path('login/', login_page, name='login'),
    path('logout/', logout_view, name='logout'),

    # ============ RESTAURANTS ============
    path('restaurants/', restaurant_list, name='restaurant-list'),
    path('restaurants/new/', restaurant_create, name='restaurant-create'),
    path('restaurants/<str:restaurant_id>/',
         restaurant_detail, name='restaurant-detail'),
    path('restaurants/<str:restaurant_id>/edit/',
         restaurant_edit, name='restaurant-edit'),
    path('restaurants/<str:restaurant_id>/<str:action>/',
         restaurant_confirm, name='restaurant-confirm'),

    # ============ DISH CATEGORIES ============
    path('categories/', category_list, name='category-list'),
    path('categories/new/', category_create, name='category-create'),
    path('categories/<str:category_id>/edit/',
         category_edit, name='category-edit'),
    path('categories/<str:category_id>/toggle/',
         category_toggle, name='category-toggle'),
    path('categories/<str:category_id>/delete/',
         category_delete, name='category-delete'),

    # ============ DASHBOARD & ANALYTICS ============
    path('', include('admin_panel.urls')),

    # ============ API ENDPOINTS ============
    path('api/', include('restaurants.urls')),
    path('api/', include('menu.urls')),
    path('api/', include('core.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL,
                          document_root=settings.STATIC_ROOT)
