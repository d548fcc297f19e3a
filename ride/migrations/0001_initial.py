import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Ride',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('Open', 'Open for Booking'), ('Full', 'Fully Booked'), ('Confirmed', 'Confirmed'), ('InProgress', 'Trip In Progress'), ('Completed', 'Completed'), ('Cancelled', 'Cancelled')], default='Open', max_length=20)),
                ('origin_address', models.CharField(blank=True, max_length=255)),
                ('destination_address', models.CharField(blank=True, max_length=255)),
                ('departure_time', models.DateTimeField(default=django.utils.timezone.now)),
                ('seats_total', models.PositiveSmallIntegerField(default=4)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('driver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='driven_rides', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [
                    models.Index(fields=['status'], name='ride_ride_status_idx'),
                    models.Index(fields=['driver'], name='ride_ride_driver_idx'),
                    models.Index(fields=['departure_time'], name='ride_ride_depart_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('Pending', 'Pending Driver Approval'), ('Confirmed', 'Confirmed'), ('Completed', 'Completed'), ('CancelledDriver', 'Cancelled by Driver'), ('CancelledUser', 'Cancelled by Rider')], default='Pending', max_length=20)),
                ('seats', models.PositiveSmallIntegerField(default=1)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('ride', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='ride.ride')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['ride', 'user'], name='ride_bookin_ride_user_idx'),
                    models.Index(fields=['status'], name='ride_bookin_status_idx'),
                ],
            },
        ),
    ]
