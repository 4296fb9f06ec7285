from __future__ import annotations
import builtins
from typing import Optional


class FunctionKitError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArityError(FunctionKitError, builtins.ValueError):
    """Raised when a function is built for, or handed, the wrong number of
    arguments.

    actual is None when the error is about the requested arity itself rather
    than about a concrete argument tuple.
    """

    def __init__(
        self, message: str, expected: int, actual: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual

    def __repr__(self) -> str:
        return f'ArityError({self.message!r}, expected={
            self.expected!r
        }, actual={self.actual!r})'


class ImmutableAttributeError(FunctionKitError, builtins.AttributeError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Attribute "{name}" cannot be set more than once')
        self.name = name


def check_arity(arity: int, minimum: int = 1) -> None:
    if arity < minimum:
        raise ArityError(
            'arity must be at least {}, got {}'.format(minimum, arity),
            minimum,
        )


def check_arguments(arguments: tuple, arity: int) -> tuple:
    if not isinstance(arguments, tuple) or len(arguments) != arity:
        actual = len(arguments) if isinstance(arguments, tuple) else None
        raise ArityError(
            'expected a tuple of {} arguments, got {!r}'.format(
                arity, arguments
            ),
            arity,
            actual,
        )
    return arguments
