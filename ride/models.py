from django.conf import settings
from django.db import models
from django.utils import timezone


class Ride(models.Model):
    STATUS_CHOICES = [
        ('Open', 'Open for Booking'),
        ('Full', 'Fully Booked'),
        ('Confirmed', 'Confirmed'),
        ('InProgress', 'Trip In Progress'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
    ]

    driver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='driven_rides',
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Open')

    origin_address = models.CharField(max_length=255, blank=True)
    destination_address = models.CharField(max_length=255, blank=True)
    departure_time = models.DateTimeField(default=timezone.now)
    seats_total = models.PositiveSmallIntegerField(default=4)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['status'], name='ride_ride_status_idx'),
            models.Index(fields=['driver'], name='ride_ride_driver_idx'),
            models.Index(fields=['departure_time'], name='ride_ride_depart_idx'),
        ]

    def __str__(self):
        return f"Ride {self.id} - {self.origin_address} to {self.destination_address}"

    @property
    def is_cancelled(self):
        return self.status == 'Cancelled'


class Booking(models.Model):
    CANCELLED_STATUSES = ('CancelledDriver', 'CancelledUser')

    STATUS_CHOICES = [
        ('Pending', 'Pending Driver Approval'),
        ('Confirmed', 'Confirmed'),
        ('Completed', 'Completed'),
        ('CancelledDriver', 'Cancelled by Driver'),
        ('CancelledUser', 'Cancelled by Rider'),
    ]

    ride = models.ForeignKey(Ride, on_delete=models.CASCADE, related_name='bookings')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='bookings',
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Pending')
    seats = models.PositiveSmallIntegerField(default=1)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['ride', 'user'], name='ride_bookin_ride_user_idx'),
            models.Index(fields=['status'], name='ride_bookin_status_idx'),
        ]

    def __str__(self):
        return f"Booking {self.id} - {self.user} on ride {self.ride_id}"

    @property
    def is_cancelled(self):
        return self.status in self.CANCELLED_STATUSES
