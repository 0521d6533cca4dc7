"""
Error types shared by the repository, service and session layers.

Views are the only place these are turned into user-facing text.
"""


class PortfolioError(Exception):
    """Base class for all application errors."""


class RecordNotFound(PortfolioError):
    """No row matches the requested identifier."""

    def __init__(self, entity, record_id):
        super().__init__(f'{entity} {record_id} not found')
        self.entity = entity
        self.record_id = record_id


class StoreError(PortfolioError):
    """The database rejected or failed to run a statement."""


class AuthenticationError(PortfolioError):
    """The request does not carry a usable admin session."""


class NotAuthenticated(AuthenticationError):
    """Unknown or missing session token."""


class SessionExpired(AuthenticationError):
    """The session existed but its lifetime has elapsed."""
