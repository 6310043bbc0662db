class MockDraftException(Exception):
    """Base class for all mock-draft engine errors."""


class ValidationError(MockDraftException):
    """Raised when draft settings fall outside the allowed options."""

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__("; ".join(self.errors))


class RosterFullError(MockDraftException):
    """Raised when a pick is applied to a roster with no legal slot left."""


class PlayerDataError(MockDraftException):
    """Raised when a player source contains a malformed row."""
