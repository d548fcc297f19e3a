"""
URL configuration for rideshare project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Core Django URLs
    path('admin/', admin.site.urls),

    # App URLs
    path('', include('user.urls')),  # Landing page and email-link sign-in
    path('chat/', include('chat.urls')),  # Ride chat API
]
