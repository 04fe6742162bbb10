"""Errors raised by the generator and the command line."""

from .models import MAX_LENGTH, MIN_LENGTH


class PasswordGeneratorError(ValueError):
    pass


class InvalidLength(PasswordGeneratorError):
    def __init__(self, length):
        super().__init__(
            f"length must be an integer between {MIN_LENGTH} and {MAX_LENGTH}, got {length!r}"
        )
        self.length = length


class NoClassEnabled(PasswordGeneratorError):
    def __init__(self):
        super().__init__("At least one character set must be enabled")


class UnsupportedPasswordType(PasswordGeneratorError):
    def __init__(self, kind: str):
        super().__init__(f"password type '{kind}' is not implemented")
        self.kind = kind


def check_length(length) -> int:
    """Return `length` unchanged, or raise InvalidLength."""
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(length)
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise InvalidLength(length)
    return length
