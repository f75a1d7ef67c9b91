"""Error kinds raised by document lookups and value coercion."""

from __future__ import annotations


class FlatError(Exception):
    """Base class for lookup and coercion failures."""

    def __init__(self, message: str) -> None:
        super().__init__(f"flat: {message}")


class NotFoundError(FlatError, KeyError):
    """Raised when a key path is absent or crosses a non-mapping value."""

    def __init__(self) -> None:
        super().__init__("not found")

    def __str__(self) -> str:
        return str(self.args[0])


class TypeMismatchError(FlatError, TypeError):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(f"wrong data type: {self.expected} expected, got {self.actual}")
