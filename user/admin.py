from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ['email', 'name', 'user_type', 'is_active', 'date_joined']
    list_filter = ['user_type', 'is_active', 'is_staff']
    search_fields = ['email', 'name', 'username']
    ordering = ['email']

    fieldsets = UserAdmin.fieldsets + (
        ('Ride Profile', {
            'fields': ('name', 'phone', 'user_type')
        }),
    )
