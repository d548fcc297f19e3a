"""
Ride chat operations.

Every read or write goes through ``validate_credentials`` first so posting
and reading share one access rule: the ride must exist and not be cancelled,
and the caller must be its driver or hold a booking on it that has not been
cancelled.
"""
import enum
import logging

from django.db import DatabaseError
from django.db.models import Prefetch

from ride.models import Ride, Booking
from .exceptions import ChatClosed, RideNotFound, StoreFailure, UnauthorizedSender
from .models import ChatMessage

logger = logging.getLogger(__name__)

DRIVER_PLACEHOLDER_NAME = 'Champion'
RIDER_PLACEHOLDER_NAME = 'Rider'


class ChatAccess(enum.Enum):
    AUTHORIZED = 'authorized'
    NOT_FOUND = 'not_found'
    RIDE_CANCELLED = 'ride_cancelled'
    BOOKING_CANCELLED = 'booking_cancelled'
    UNAUTHORIZED = 'unauthorized'

    @property
    def chat_closed(self):
        return self in (ChatAccess.RIDE_CANCELLED, ChatAccess.BOOKING_CANCELLED)


def evaluate_chat_access(ride, user_id, user_bookings=()):
    """Decide whether ``user_id`` may use the chat of ``ride``.

    ``user_bookings`` holds only that user's bookings on the ride. Does not
    touch the database.
    """
    if ride is None:
        return ChatAccess.NOT_FOUND
    if ride.is_cancelled:
        return ChatAccess.RIDE_CANCELLED
    if ride.driver_id == user_id:
        return ChatAccess.AUTHORIZED
    if user_bookings:
        if user_bookings[0].is_cancelled:
            return ChatAccess.BOOKING_CANCELLED
        return ChatAccess.AUTHORIZED
    return ChatAccess.UNAUTHORIZED


def validate_credentials(ride_id, user_id):
    """Raise a ChatError unless the user may read and post in the ride's chat."""
    try:
        ride = (
            Ride.objects
            .prefetch_related(Prefetch(
                'bookings',
                queryset=Booking.objects.filter(user_id=user_id),
                to_attr='user_bookings',
            ))
            .filter(id=ride_id)
            .first()
        )
    except DatabaseError as e:
        logger.error("Unable to fetch ride: %s", e)
        raise StoreFailure() from e

    access = evaluate_chat_access(ride, user_id, ride.user_bookings if ride else ())

    if access is ChatAccess.NOT_FOUND:
        raise RideNotFound()
    if access is ChatAccess.RIDE_CANCELLED:
        raise ChatClosed()
    if access is ChatAccess.BOOKING_CANCELLED:
        raise ChatClosed('Ride booking is cancelled. Chat closed.')
    if access is ChatAccess.UNAUTHORIZED:
        raise UnauthorizedSender()
    return True


def insert_message(ride_id, sender_id, content):
    """Store a message from ``sender_id`` in the ride's chat and return it."""
    try:
        validate_credentials(ride_id, sender_id)
        return ChatMessage.objects.create(ride_id=ride_id, user_id=sender_id, content=content)
    except Exception as e:
        logger.error("Error insert message: %s", e)
        raise


def get_messages_by_ride(user_id, ride_id):
    """Fetch a ride's messages oldest first, each tagged with the sender's role."""
    validate_credentials(ride_id, user_id)

    # Validation and this lookup are separate reads; the ride may be gone by now.
    ride = Ride.objects.filter(id=ride_id).values('driver_id').first()
    if ride is None:
        raise RideNotFound()

    messages = (
        ChatMessage.objects.filter(ride_id=ride_id)
        .select_related('user')
        .order_by('created_at', 'id')
    )
    return [message_entry(message, ride['driver_id']) for message in messages]


def get_ride_participants(ride_id):
    """List the driver followed by every booked rider, in booking order.

    Riders whose booking was cancelled are still listed.
    """
    try:
        ride = _fetch_ride_with_people(ride_id)
        if ride is None:
            raise RideNotFound()

        participants = [participant_entry(ride.driver, is_driver=True)]
        participants.extend(
            participant_entry(booking.user, is_driver=False)
            for booking in ride.bookings.all()
        )
        return participants
    except Exception as e:
        logger.error("Error fetching participants for ride ID %s: %s", ride_id, e)
        raise


def _fetch_ride_with_people(ride_id):
    return (
        Ride.objects
        .select_related('driver')
        .prefetch_related(Prefetch(
            'bookings',
            queryset=Booking.objects.select_related('user').order_by('created_at', 'id'),
        ))
        .filter(id=ride_id)
        .first()
    )


def message_record(message):
    return {
        'id': message.id,
        'ride_id': message.ride_id,
        'user_id': message.user_id,
        'content': message.content,
        'created_at': message.created_at,
    }


def message_entry(message, driver_id):
    entry = message_record(message)
    entry['user'] = {
        **message.user.public_profile,
        'is_driver': message.user_id == driver_id,
    }
    return entry


def participant_entry(user, is_driver):
    placeholder = DRIVER_PLACEHOLDER_NAME if is_driver else RIDER_PLACEHOLDER_NAME
    return {
        'id': user.id,
        'name': user.name or placeholder,
        'email': user.email,
        'is_driver': is_driver,
    }
