from django.urls import path
from . import api_views

app_name = 'chat'

urlpatterns = [
    # Get all messages for a ride
    path('api/ride/<int:ride_id>/messages/', api_views.get_messages, name='get_messages'),
    # Send a message to a ride's chat
    path('api/ride/<int:ride_id>/messages/send/', api_views.post_message, name='post_message'),
    # Driver and riders of a ride
    path('api/ride/<int:ride_id>/participants/', api_views.get_participants, name='get_participants'),
]
