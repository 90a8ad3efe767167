from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from core.notifications import MessagesNotifier
from .business_logic import AdminAuthLogic
from .decorators import public_route

# ============ Authentication Views ============


@public_route
@require_http_methods(['GET', 'POST'])
def login_page(request):
    """Admin login form"""
    errors = {}
    form_data = {}

    if request.method == 'POST':
        form_data = {
            'email': request.POST.get('email', '').strip(),
            'password': request.POST.get('password', ''),
        }
        success, errors = AdminAuthLogic.login(
            request.admin_session, form_data, MessagesNotifier(request))
        if success:
            return redirect('admin-dashboard')

    return render(request, 'accounts/login.html', {
        'errors': errors,
        'email': form_data.get('email', ''),
    })


@require_POST
def logout_view(request):
    """Clear the admin token and go back to the login page"""
    AdminAuthLogic.logout(request.admin_session, MessagesNotifier(request))
    return redirect('login')
