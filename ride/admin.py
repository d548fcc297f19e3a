from django.contrib import admin

from .models import Ride, Booking


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ['user', 'status', 'seats', 'created_at']


@admin.register(Ride)
class RideAdmin(admin.ModelAdmin):
    list_display = ['id', 'driver', 'status', 'origin_address', 'destination_address', 'departure_time']
    list_filter = ['status']
    search_fields = ['driver__email', 'driver__name', 'origin_address', 'destination_address']
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'ride', 'user', 'status', 'seats', 'created_at']
    list_filter = ['status']
    search_fields = ['user__email', 'user__name', 'ride__id']
