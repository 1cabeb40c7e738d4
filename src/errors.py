"""Business errors raised by the gift registry and RSVP ledger.

Each error carries the HTTP status code routers render it with. Field-level
validation is handled by the request schemas before any of these can occur.
"""


class RegistryError(Exception):
    """Base class for rejected requests with a human-readable reason."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(RegistryError):
    """The referenced gift, guest or record does not exist for the given keys."""

    status_code = 404


class ConflictError(RegistryError):
    """A precondition on the current state failed."""

    status_code = 409


class InvalidCredentialError(RegistryError):
    """The presented reservation code does not match the stored one."""

    status_code = 403
