from typing import Optional


class RelayError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RelayError):
    """A required request field is missing."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(RelayError):
    """The referenced user is unknown to one of the two stores."""

    status_code = 404
    default_message = "User not found"


class ServerError(RelayError):
    status_code = 500
