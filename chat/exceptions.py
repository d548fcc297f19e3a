from rest_framework import status


class ChatError(Exception):
    """Base class for failures a ride chat caller is allowed to see."""

    default_message = 'Chat unavailable'
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RideNotFound(ChatError):
    default_message = 'Ride not found'
    status_code = status.HTTP_404_NOT_FOUND


class ChatClosed(ChatError):
    default_message = 'Ride is cancelled. Chat closed.'
    status_code = status.HTTP_403_FORBIDDEN


class UnauthorizedSender(ChatError):
    default_message = 'Unauthorized sender'
    status_code = status.HTTP_403_FORBIDDEN


class StoreFailure(ChatError):
    default_message = 'Something went wrong. Please try again later.'
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
