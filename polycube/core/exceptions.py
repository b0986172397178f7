"""Custom exception hierarchy for puzzle bookkeeping."""


class PuzzleError(Exception):
    """Base exception for puzzle failures."""


class MissingIdError(PuzzleError):
    """Raised when a piece or problem without an ID is added or removed."""


class DuplicateIdError(PuzzleError):
    """Raised when adding a piece or problem whose ID is already taken."""


class NotFoundError(PuzzleError, KeyError):
    """Raised when a piece or problem ID is not present in the puzzle."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message verbatim.
        return str(self.args[0]) if self.args else ""


class PuzzleFileError(PuzzleError):
    """Raised when a stored puzzle document cannot be parsed."""
