from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from .exceptions import ChatError
from .services import (
    get_messages_by_ride,
    get_ride_participants,
    insert_message,
    message_record,
    validate_credentials,
)


def _error_response(error):
    return Response({'error': error.message}, status=error.status_code)


def _serialize_message(entry):
    data = dict(entry)
    data['created_at'] = entry['created_at'].isoformat()
    return data


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_messages(request, ride_id):
    """Return a ride's chat, oldest first (driver or booked riders only)."""
    try:
        messages = get_messages_by_ride(user_id=request.user.id, ride_id=ride_id)
    except ChatError as e:
        return _error_response(e)

    return Response({'messages': [_serialize_message(m) for m in messages]})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def post_message(request, ride_id):
    """Post a message to a ride's chat as the signed-in user."""
    data = request.data if isinstance(request.data, dict) else {}
    content = data.get('content') or data.get('message') or ''
    if not isinstance(content, str) or not content.strip():
        return Response({'error': 'Message is required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        msg = insert_message(ride_id=ride_id, sender_id=request.user.id, content=content.strip())
    except ChatError as e:
        return _error_response(e)

    return Response(_serialize_message(message_record(msg)), status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_participants(request, ride_id):
    try:
        validate_credentials(ride_id=ride_id, user_id=request.user.id)
        participants = get_ride_participants(ride_id)
    except ChatError as e:
        return _error_response(e)

    return Response({'participants': participants})
