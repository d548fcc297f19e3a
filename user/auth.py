"""
Sign-in providers.

Only passwordless email-link sign-in is offered: the user submits an email
address, receives a signed link, and following it logs them in. Links expire
after ``AUTH_EMAIL_LINK_MAX_AGE`` seconds and stop working once used, because
the token embeds the user's last login time.
"""
import logging
import uuid
from datetime import timedelta

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import get_user_model
from django.core import signing
from django.core.mail import send_mail
from django.shortcuts import redirect
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils import timezone
from django.utils.timesince import timeuntil

from .forms import EmailSignInForm

logger = logging.getLogger(__name__)

User = get_user_model()


class EmailLinkProvider:
    """Mail a one-time sign-in link through the configured email backend."""

    id = 'resend'
    salt = 'user.sign-in'
    subject = 'Sign in to RideShare'
    template_name = 'user/email/sign_in_link.txt'

    def sign_in(self, request, form_data):
        form = EmailSignInForm(data=form_data)
        if not form.is_valid():
            messages.error(request, "Please enter a valid email address.")
            return redirect('user:landing')

        user = self.get_or_create_user(form.cleaned_data['email'])
        if not user.is_active:
            messages.error(request, "This account has been disabled. Please contact support.")
            return redirect('user:landing')

        link = request.build_absolute_uri(
            reverse('user:verify_sign_in', args=[self.make_token(user)])
        )
        self.send_link(user, link)
        request.session['sign_in_email'] = user.email
        return redirect('user:check_email')

    def get_or_create_user(self, email):
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            # No password: the account can only be reached through email links.
            user = User.objects.create_user(username=self.free_username(email), email=email)
            logger.info("Created account for %s on first sign-in", email)
        return user

    @staticmethod
    def free_username(email):
        """Use the email as username unless another account already holds it."""
        username = email[:150]
        if User.objects.filter(username=username).exists():
            username = f"{email[:117]}-{uuid.uuid4().hex}"
        return username

    def make_token(self, user):
        return signing.dumps(
            {'uid': user.pk, 'email': user.email, 'll': self._login_stamp(user)},
            salt=self.salt,
        )

    def verify(self, token):
        """Return the user a sign-in token belongs to, or None if it is invalid."""
        try:
            data = signing.loads(token, salt=self.salt, max_age=settings.AUTH_EMAIL_LINK_MAX_AGE)
        except signing.SignatureExpired:
            logger.info("Rejected expired sign-in link")
            return None
        except signing.BadSignature:
            logger.warning("Rejected tampered sign-in link")
            return None

        user = User.objects.filter(pk=data.get('uid'), is_active=True).first()
        if user is None or user.email != data.get('email'):
            return None
        # Already used: logging in moved last_login past the stamp in the token.
        if self._login_stamp(user) != data.get('ll'):
            return None
        return user

    def send_link(self, user, link):
        body = render_to_string(self.template_name, {
            'user': user,
            'link': link,
            'valid_for': self.valid_for(),
        })
        send_mail(self.subject, body, settings.DEFAULT_FROM_EMAIL, [user.email])
        logger.info("Sign-in link sent to %s", user.email)

    @staticmethod
    def valid_for():
        """Link lifetime in words, e.g. "1 day" or "30 minutes"."""
        now = timezone.now()
        return timeuntil(now + timedelta(seconds=settings.AUTH_EMAIL_LINK_MAX_AGE), now)

    @staticmethod
    def _login_stamp(user):
        return user.last_login.isoformat() if user.last_login else ''


PROVIDERS = {
    EmailLinkProvider.id: EmailLinkProvider(),
}


def get_provider(provider_id):
    try:
        return PROVIDERS[provider_id]
    except KeyError:
        raise ValueError(f"Unknown sign-in provider: {provider_id}")


def sign_in(provider_id, request, form_data):
    """Forward submitted form data to a registered sign-in provider."""
    return get_provider(provider_id).sign_in(request, form_data)
