MAX_TRANSCRIPT_LENGTH = 1000
MAX_QUERY_LENGTH = 500


class VoiceExpenseError(ValueError):
    """Base class for rejected input."""


class InvalidInputError(VoiceExpenseError):
    def __init__(self, message: str = "Invalid transcript: must be a non-empty string") -> None:
        super().__init__(message)


class InputTooLongError(VoiceExpenseError):
    def __init__(self, length: int, max_length: int = MAX_TRANSCRIPT_LENGTH, what: str = "Transcript") -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(f"{what} too long: maximum {max_length} characters (got {length})")


def require_text(value: object, max_length: int, what: str = "Transcript") -> str:
    """Return ``value`` trimmed, or raise if it is not usable text."""
    if not isinstance(value, str):
        raise InvalidInputError(f"Invalid {what.lower()}: must be a non-empty string")
    trimmed = value.strip()
    if not trimmed:
        raise InvalidInputError(f"Invalid {what.lower()}: must be a non-empty string")
    if len(trimmed) > max_length:
        raise InputTooLongError(len(trimmed), max_length, what)
    return trimmed
