from django.contrib.auth.models import AbstractUser
from django.db import models


class CustomUser(AbstractUser):
    USER_TYPES = (
        ('R', 'Rider'),
        ('A', 'Admin'),
        ('D', 'Driver'),
    )

    email = models.EmailField(unique=True)
    # Display name shown in ride chats. Left empty until the user sets one.
    name = models.CharField(max_length=150, blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    user_type = models.CharField(max_length=1, choices=USER_TYPES, default='R')

    def __str__(self):
        return self.name or self.email or self.username

    @property
    def public_profile(self):
        """The subset of the user visible to other ride participants."""
        return {'id': self.id, 'name': self.name, 'email': self.email}
