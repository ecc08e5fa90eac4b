"""Input errors raised before text reaches the classifier."""

from __future__ import annotations


class InvalidInputError(Exception):
    """Raised when text cannot be checked.

    ``title`` and ``message`` are user-facing and shown as-is.
    """

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


class EmptyInputError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Please Enter Text", "The input field cannot be empty.")
