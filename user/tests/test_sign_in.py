import re

from django.contrib.auth import get_user_model
from django.core import mail
from django.test import RequestFactory, TestCase, override_settings
from django.urls import reverse

from user.auth import EmailLinkProvider, get_provider, sign_in

User = get_user_model()


class EmailSignInTest(TestCase):
    def _request_link(self, email):
        return self.client.post(reverse('user:sign_in'), {'email': email})

    def _token_from_outbox(self):
        match = re.search(r'/signin/verify/([^/\s]+)/', mail.outbox[-1].body)
        self.assertIsNotNone(match)
        return match.group(1)

    def test_landing_page(self):
        response = self.client.get(reverse('user:landing'))
        self.assertEqual(response.status_code, 200)

    def test_sign_in_sends_link_and_creates_account(self):
        response = self._request_link('New.Rider@Example.com')
        self.assertRedirects(response, reverse('user:check_email'))
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ['new.rider@example.com'])
        user = User.objects.get(email='new.rider@example.com')
        self.assertFalse(user.has_usable_password())

    def test_existing_user_is_reused(self):
        User.objects.create_user(username='rob', email='rob@example.com')
        self._request_link('ROB@example.com')
        self.assertEqual(User.objects.filter(email__iexact='rob@example.com').count(), 1)
        self.assertEqual(mail.outbox[0].to, ['rob@example.com'])

    def test_username_taken_by_another_account(self):
        other = User.objects.create_user(username='rob@example.com', email='robert@work.example')
        response = self._request_link('rob@example.com')
        self.assertRedirects(response, reverse('user:check_email'))
        user = User.objects.get(email='rob@example.com')
        self.assertNotEqual(user.pk, other.pk)
        self.assertTrue(user.username.startswith('rob@example.com-'))
        self.assertLessEqual(len(user.username), 150)
        self.assertEqual(mail.outbox[0].to, ['rob@example.com'])

    @override_settings(AUTH_EMAIL_LINK_MAX_AGE=30 * 60)
    def test_short_link_lifetime_shown_in_minutes(self):
        self._request_link('rob@example.com')
        body = mail.outbox[0].body.replace('\xa0', ' ')
        self.assertIn('expires in 30 minutes', body)
        self.assertNotIn('0 hours', body)

    def test_default_link_lifetime_shown_as_a_day(self):
        self._request_link('rob@example.com')
        body = mail.outbox[0].body.replace('\xa0', ' ')
        self.assertIn('expires in 1 day', body)

    def test_invalid_email_goes_back_to_landing(self):
        response = self._request_link('not-an-email')
        self.assertRedirects(response, reverse('user:landing'))
        self.assertEqual(len(mail.outbox), 0)
        self.assertFalse(User.objects.exists())

    def test_sign_in_is_post_only(self):
        response = self.client.get(reverse('user:sign_in'))
        self.assertEqual(response.status_code, 405)

    def test_link_logs_user_in_once(self):
        self._request_link('rob@example.com')
        token = self._token_from_outbox()
        url = reverse('user:verify_sign_in', args=[token])

        response = self.client.get(url)
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        user = User.objects.get(email='rob@example.com')
        self.assertEqual(int(self.client.session['_auth_user_id']), user.pk)

        self.client.logout()
        response = self.client.get(url)
        self.assertRedirects(response, reverse('user:landing'))
        self.assertNotIn('_auth_user_id', self.client.session)

    def test_tampered_token_rejected(self):
        response = self.client.get(reverse('user:verify_sign_in', args=['bogus-token']))
        self.assertRedirects(response, reverse('user:landing'))
        self.assertNotIn('_auth_user_id', self.client.session)

    @override_settings(AUTH_EMAIL_LINK_MAX_AGE=-1)
    def test_expired_token_rejected(self):
        user = User.objects.create_user(username='rob', email='rob@example.com')
        provider = get_provider('resend')
        self.assertIsNone(provider.verify(provider.make_token(user)))

    def test_inactive_user_cannot_request_link(self):
        User.objects.create_user(username='gone', email='gone@example.com', is_active=False)
        response = self._request_link('gone@example.com')
        self.assertRedirects(response, reverse('user:landing'))
        self.assertEqual(len(mail.outbox), 0)

    def test_logout(self):
        user = User.objects.create_user(username='rob', email='rob@example.com')
        self.client.force_login(user)
        response = self.client.post(reverse('user:logout'))
        self.assertRedirects(response, reverse('user:landing'))
        self.assertNotIn('_auth_user_id', self.client.session)


class ProviderRegistryTest(TestCase):
    def test_resend_provider_registered(self):
        self.assertIsInstance(get_provider('resend'), EmailLinkProvider)

    def test_unknown_provider(self):
        request = RequestFactory().post('/signin/', {'email': 'rob@example.com'})
        with self.assertRaises(ValueError):
            sign_in('github', request, request.POST)
