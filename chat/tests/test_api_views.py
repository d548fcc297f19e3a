from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from chat.models import ChatMessage
from ride.models import Booking, Ride

User = get_user_model()


class ChatApiTestCase(TestCase):
    def setUp(self):
        self.driver = User.objects.create_user(username='drv', email='drv@example.com', user_type='D')
        self.rider = User.objects.create_user(username='rdr', email='rdr@example.com', name='Rob')
        self.stranger = User.objects.create_user(username='str', email='str@example.com')
        self.ride = Ride.objects.create(driver=self.driver, status='Confirmed')
        self.booking = Booking.objects.create(ride=self.ride, user=self.rider, status='Confirmed')
        self.client = APIClient()

    def _url(self, name, ride_id=None):
        return reverse(f'chat:{name}', args=[ride_id or self.ride.id])

    def test_requires_authentication(self):
        response = self.client.get(self._url('get_messages'))
        self.assertEqual(response.status_code, 403)

    def test_post_then_get(self):
        self.client.force_authenticate(user=self.rider)
        response = self.client.post(self._url('post_message'), {'content': ' hi '}, format='json')
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['content'], 'hi')
        self.assertEqual(response.data['user_id'], self.rider.id)
        self.assertIsInstance(response.data['created_at'], str)

        self.client.force_authenticate(user=self.driver)
        response = self.client.get(self._url('get_messages'))
        self.assertEqual(response.status_code, 200)
        messages = response.data['messages']
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0]['user']['id'], self.rider.id)
        self.assertFalse(messages[0]['user']['is_driver'])

    def test_sender_is_always_the_signed_in_user(self):
        self.client.force_authenticate(user=self.rider)
        self.client.post(self._url('post_message'), {'content': 'hi', 'sender_id': self.driver.id}, format='json')
        self.assertEqual(ChatMessage.objects.get().user_id, self.rider.id)

    def test_blank_message_rejected(self):
        self.client.force_authenticate(user=self.rider)
        response = self.client.post(self._url('post_message'), {'content': '   '}, format='json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'Message is required')
        self.assertFalse(ChatMessage.objects.exists())

    def test_malformed_message_body_rejected(self):
        self.client.force_authenticate(user=self.rider)
        for body in ({'content': 5}, {'content': ['hi']}, ['hi']):
            response = self.client.post(self._url('post_message'), body, format='json')
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.data['error'], 'Message is required')
        self.assertFalse(ChatMessage.objects.exists())

    def test_stranger_gets_forbidden(self):
        self.client.force_authenticate(user=self.stranger)
        response = self.client.post(self._url('post_message'), {'content': 'hi'}, format='json')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['error'], 'Unauthorized sender')

    def test_cancelled_ride(self):
        self.ride.status = 'Cancelled'
        self.ride.save()
        self.client.force_authenticate(user=self.driver)
        response = self.client.get(self._url('get_messages'))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['error'], 'Ride is cancelled. Chat closed.')

    def test_cancelled_booking(self):
        self.booking.status = 'CancelledUser'
        self.booking.save()
        self.client.force_authenticate(user=self.rider)
        response = self.client.post(self._url('post_message'), {'content': 'hi'}, format='json')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['error'], 'Ride booking is cancelled. Chat closed.')

    def test_unknown_ride(self):
        self.client.force_authenticate(user=self.driver)
        response = self.client.get(self._url('get_messages', ride_id=self.ride.id + 100))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['error'], 'Ride not found')

    def test_participants(self):
        self.client.force_authenticate(user=self.rider)
        response = self.client.get(self._url('get_participants'))
        self.assertEqual(response.status_code, 200)
        participants = response.data['participants']
        self.assertEqual([p['id'] for p in participants], [self.driver.id, self.rider.id])
        self.assertEqual(participants[0]['name'], 'Champion')
        self.assertTrue(participants[0]['is_driver'])

    def test_participants_hidden_from_strangers(self):
        self.client.force_authenticate(user=self.stranger)
        response = self.client.get(self._url('get_participants'))
        self.assertEqual(response.status_code, 403)
