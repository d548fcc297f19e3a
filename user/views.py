from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth import logout as auth_logout
from django.shortcuts import render, redirect
from django.views import View
from django.views.decorators.http import require_POST

from .auth import get_provider, sign_in
from .forms import EmailSignInForm


class LandingPage(View):
    template_name = 'user/landing.html'

    def get(self, request):
        form = EmailSignInForm()
        return render(request, self.template_name, {'form': form})


@require_POST
def handle_sign_in(request):
    return sign_in('resend', request, request.POST)


class CheckEmail(View):
    template_name = 'user/check_email.html'

    def get(self, request):
        email = request.session.get('sign_in_email')
        if not email:
            return redirect('user:landing')
        return render(request, self.template_name, {'email': email})


class VerifySignIn(View):
    def get(self, request, token):
        user = get_provider('resend').verify(token)
        if user is None:
            messages.error(request, "This sign-in link is invalid or has expired. Please request a new one.")
            return redirect('user:landing')

        login(request, user)
        request.session.pop('sign_in_email', None)
        return redirect(settings.LOGIN_REDIRECT_URL)


@require_POST
def logout_view(request):
    """Log the user out and redirect to the landing page."""
    auth_logout(request)
    return redirect('user:landing')
