"""In-place update adapters.

Python has no inout parameters, so a mutable binding is made explicit as a
Ref, and a Mutator is a callback that is handed one."""

from typing import Callable, Generic, TypeVar
import functionkit.function

_T = TypeVar('_T')


class Ref(Generic[_T]):
    """A mutable binding holding a single value."""

    def __init__(self, value: _T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__qualname__, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore


class Mutator(Generic[_T]):
    def __init__(self, callback: Callable[[Ref[_T]], None]) -> None:
        self.__callback = callback

    def __call__(self, ref: Ref[_T]) -> None:
        self.__callback(ref)

    def to_function(self) -> 'functionkit.function.Function[_T, _T]':
        """Convert back to a pure function that mutates a fresh binding of its
        input and returns the final value."""

        def mutated(value: _T) -> _T:
            ref = Ref(value)
            self(ref)
            return ref.value

        return functionkit.function.Function(mutated)

    def __repr__(self) -> str:
        callback_name = getattr(
            self.__callback, '__qualname__', repr(self.__callback)
        )
        return '{}({})'.format(type(self).__qualname__, callback_name)
