from django.conf import settings
from django.db import models

from ride.models import Ride


class ChatMessage(models.Model):
    ride = models.ForeignKey(Ride, on_delete=models.CASCADE, related_name='messages')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_messages',
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'chat_chatmessage'
        # id breaks ties between messages stored within the same clock tick
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['ride', 'created_at'], name='chat_msg_ride_created_idx'),
        ]

    def __str__(self):
        return f"Message {self.id} for Ride {self.ride_id} by {self.user_id}"
