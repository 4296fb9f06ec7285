"""The Function wrapper and the combinators that build new Functions out of
existing ones.

Every combinator accepts either a Function or a plain callable wherever it
expects a function argument, since a Function is itself callable."""

from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)
from typing_extensions import TypeVarTuple, Unpack
import functools
from functionkit.accessors import (
    attribute_getter,
    attribute_updater,
    split_path,
)
from functionkit.errors import check_arguments, check_arity
from functionkit.logging import get_logger
from functionkit.set_once import SetOnce
import functionkit.mutator

_In = TypeVar('_In')
_Out = TypeVar('_Out')
_A = TypeVar('_A')
_B = TypeVar('_B')
_C = TypeVar('_C')
_D = TypeVar('_D')
_E = TypeVar('_E')
_F = TypeVar('_F')
_G = TypeVar('_G')
_H = TypeVar('_H')
_I = TypeVar('_I')
_Ts = TypeVarTuple('_Ts')

_logger = get_logger(__name__)


class Function(Generic[_In, _Out]):
    """A wrapper around a one-argument callable.

    The wrapped callable is fixed at construction. Calling apply with several
    positional arguments passes them to it as one tuple, and calling apply
    with no arguments passes the empty tuple, so a Function over tuples reads
    like a function of several arguments:

        add = Function(lambda pair: pair[0] + pair[1])
        add.apply(1, 2)      # 3
        add.apply((1, 2))    # 3
    """

    _transformation: SetOnce[Callable[[_In], _Out]] = SetOnce()

    def __init__(self, transformation: Callable[[_In], _Out]) -> None:
        self._transformation = transformation

    def apply(self, *arguments: Any) -> _Out:
        if len(arguments) == 1:
            return self._transformation(arguments[0])
        return self._transformation(arguments)  # type: ignore

    def __call__(self, *arguments: Any) -> _Out:
        return self.apply(*arguments)

    def __repr__(self) -> str:
        type_name = type(self).__qualname__
        func_name = getattr(
            self._transformation, '__qualname__', repr(self._transformation)
        )
        return '{}({})'.format(type_name, func_name)

    # Common functions

    @staticmethod
    def identity() -> 'Function[_A, _A]':
        return Function(_identity)

    @staticmethod
    def constant(value: _A) -> 'Function[Any, _A]':
        """A function that returns value whatever its input is."""

        def constant(_: object) -> _A:
            return value

        return Function(constant)

    # Attribute access

    @staticmethod
    def get(path: str) -> 'Function[Any, Any]':
        """A function reading the dotted attribute path from its input."""
        return Function(attribute_getter(path))

    @staticmethod
    def update(
        path: str,
    ) -> 'Function[Callable[[Any], Any], Function[Any, Any]]':
        """Lift an update of the attribute at path to an update of the whole
        object.

        The produced updaters copy the object instead of modifying it."""
        names = split_path(path)

        def update(transformation: Callable[[Any], Any]) -> Function[Any, Any]:
            return Function(attribute_updater(names, transformation))

        return Function(update)

    # Forward composition

    def piped(self, other: Callable[[_Out], _B]) -> 'Function[_In, _B]':
        def piped(input: _In) -> _B:
            return other(self.apply(input))

        return Function(piped)

    pipe = piped

    @staticmethod
    def pipeline(*functions: Callable[[Any], Any]) -> 'Function[Any, Any]':
        return pipeline(*functions)

    # Backward composition

    def composed(self, other: Callable[[_A], _In]) -> 'Function[_A, _Out]':
        def composed(input: _A) -> _Out:
            return self.apply(other(input))

        return Function(composed)

    compose = composed

    @staticmethod
    def composition(*functions: Callable[[Any], Any]) -> 'Function[Any, Any]':
        return composition(*functions)

    # Concatenation

    def concatenated(
        self: 'Function[_A, _A]', other: Callable[[_A], _A]
    ) -> 'Function[_A, _A]':
        return concatenation(self, other)

    @staticmethod
    def concatenation(
        *functions: Callable[[_A], _A],
        finally_: Optional[Callable[[_A], _A]] = None,
    ) -> 'Function[_A, _A]':
        return concatenation(*functions, finally_=finally_)

    # Optional chaining

    def chained(
        self: 'Function[_In, Optional[_B]]',
        other: Callable[[_B], Optional[_C]],
    ) -> 'Function[_In, Optional[_C]]':
        def chained(input: _In) -> Optional[_C]:
            intermediate = self.apply(input)
            if intermediate is None:
                return None
            return other(intermediate)

        return Function(chained)

    @staticmethod
    def chain(
        *functions: Callable[[Any], Optional[Any]]
    ) -> 'Function[Any, Optional[Any]]':
        return chain(*functions)

    # Currying

    def curried(self, arity: int = 2) -> 'Function[Any, Any]':
        """Separate this function's tuple input into a chain of one-argument
        functions.

            (A, B, C) -> D  =>  (A) -> (B) -> (C) -> D

        Each function in the chain remembers the arguments given so far, so a
        partial application can be reused."""
        check_arity(arity)
        _logger.debug('currying {!r} over {} arguments', self, arity)
        return _take_argument(self.apply, arity, ())

    def uncurried(self, arity: int = 2) -> 'Function[Tuple[Any, ...], Any]':
        """Collect a chain of arity one-argument functions into one function
        taking a tuple.

            (A) -> (B) -> (C) -> D  =>  (A, B, C) -> D

        The links of the chain can be Functions or plain callables."""
        check_arity(arity)
        _logger.debug('uncurrying {!r} over {} arguments', self, arity)

        def uncurried(arguments: Tuple[Any, ...]) -> Any:
            check_arguments(arguments, arity)
            result: Any = self
            for argument in arguments:
                result = result(argument)
            return result

        return Function(uncurried)

    # Argument flipping

    def flipping_first_two_arguments(
        self: 'Function[_A, Callable[[_B], _C]]',
    ) -> 'Function[_B, Function[_A, _C]]':
        """(A) -> (B) -> C  =>  (B) -> (A) -> C

        B can be a tuple of the remaining arguments, which keep their order,
        or the empty tuple. When the inner function is a plain callable of
        several arguments, use promoting_output first."""

        def flipped(second: _B) -> Function[_A, _C]:
            def reapplied(first: _A) -> _C:
                return self.apply(first)(second)

            return Function(reapplied)

        return Function(flipped)

    # Promotion

    def promoting_input(
        self: 'Function[Callable[..., _B], _Out]',
    ) -> 'Function[Function[Any, _B], _Out]':
        """Take a Function where this function takes a plain callable.

        The plain callable handed on is the Function's apply, which accepts
        the same positional arguments."""

        def promoted(function: Function[Any, _B]) -> _Out:
            if isinstance(function, Function):
                return self.apply(function.apply)
            return self.apply(function)

        return Function(promoted)

    def promoting_output(
        self: 'Function[_In, Callable[..., _B]]', arity: int = 1
    ) -> 'Function[_In, Function[Any, _B]]':
        """Return a Function where this function returns a plain callable of
        arity positional arguments."""
        check_arity(arity, minimum=0)

        def promoted(input: _In) -> Function[Any, _B]:
            return promote(self.apply(input), arity)

        return Function(promoted)

    # Conversion

    def to_mutator(
        self: 'Function[_A, _A]',
    ) -> 'functionkit.mutator.Mutator[_A]':
        """Convert to an in-place update of a Ref.

        The binding is read once, and written once after this function
        returns. It is left as it was if this function raises."""

        def mutate(ref: functionkit.mutator.Ref[_A]) -> None:
            ref.value = self.apply(ref.value)

        return functionkit.mutator.Mutator(mutate)

    def apply_mutating(
        self: 'Function[functionkit.mutator.Mutator[_A], _Out]',
        callback: Union[
            'functionkit.mutator.Mutator[_A]',
            Callable[['functionkit.mutator.Ref[_A]'], None],
        ],
    ) -> _Out:
        if not isinstance(callback, functionkit.mutator.Mutator):
            callback = functionkit.mutator.Mutator(callback)
        return self.apply(callback)


def _identity(value: _A) -> _A:
    return value


def _as_function(function: Callable[[_A], _B]) -> Function[_A, _B]:
    if isinstance(function, Function):
        return function
    return Function(function)


def _take_argument(
    apply: Callable[[Tuple[Any, ...]], Any],
    arity: int,
    received: Tuple[Any, ...],
) -> Function[Any, Any]:
    def take(argument: Any) -> Any:
        arguments = received + (argument,)
        if len(arguments) == arity:
            return apply(arguments)
        return _take_argument(apply, arity, arguments)

    return Function(take)


@overload
def promote(native: Callable[[_A], _B]) -> Function[_A, _B]:
    ...


@overload
def promote(
    native: Callable[[Unpack[_Ts]], _B], arity: int
) -> Function[Tuple[Unpack[_Ts]], _B]:
    ...


def promote(native: Callable[..., _B], arity: int = 1) -> Function[Any, _B]:
    """Wrap a plain callable of arity positional arguments.

    For arities other than one, the Function takes a tuple of that many
    elements (the empty tuple for zero) and spreads it over the arguments."""
    check_arity(arity, minimum=0)
    if arity == 1:
        return Function(native)

    def spread(arguments: Tuple[Any, ...]) -> _B:
        return native(*check_arguments(arguments, arity))

    return Function(spread)


def pipeline(*functions: Callable[[Any], Any]) -> Function[Any, Any]:
    """Feed the output of each function into the next, left to right."""
    _logger.debug('building a pipeline of {} functions', len(functions))
    if not functions:
        return Function.identity()
    first, *rest = functions
    return functools.reduce(Function.piped, rest, _as_function(first))


def composition(*functions: Callable[[Any], Any]) -> Function[Any, Any]:
    """composition(f, g, h) calls h, then g, then f."""
    _logger.debug('building a composition of {} functions', len(functions))
    if not functions:
        return Function.identity()
    first, *rest = functions
    return functools.reduce(Function.composed, rest, _as_function(first))


def concatenation(
    *functions: Callable[[_A], _A],
    finally_: Optional[Callable[[_A], _A]] = None,
) -> Function[_A, _A]:
    """Reduce the input through each function in turn, then through finally_.

    This is a pipeline restricted to functions whose input and output types
    are the same."""
    _logger.debug(
        'building a concatenation of {} functions', len(functions)
    )
    last = _identity if finally_ is None else finally_

    def concatenated(input: _A) -> _A:
        return last(
            functools.reduce(
                lambda value, function: function(value), functions, input
            )
        )

    return Function(concatenated)


def chain(
    *functions: Callable[[Any], Optional[Any]]
) -> Function[Any, Optional[Any]]:
    """Like pipeline, but stop and return None as soon as any function returns
    None."""
    _logger.debug('building a chain of {} functions', len(functions))
    if not functions:
        return Function.identity()
    first, *rest = functions
    return functools.reduce(Function.chained, rest, _as_function(first))


CurriedTwoArgumentFunction = Function[_A, Function[_B, _C]]
CurriedThreeArgumentFunction = Function[_A, Function[_B, Function[_C, _D]]]
CurriedFourArgumentFunction = Function[
    _A, Function[_B, Function[_C, Function[_D, _E]]]
]
CurriedFiveArgumentFunction = Function[
    _A, Function[_B, Function[_C, Function[_D, Function[_E, _F]]]]
]
CurriedSixArgumentFunction = Function[
    _A,
    Function[_B, Function[_C, Function[_D, Function[_E, Function[_F, _G]]]]],
]
CurriedSevenArgumentFunction = Function[
    _A,
    Function[
        _B,
        Function[
            _C, Function[_D, Function[_E, Function[_F, Function[_G, _H]]]]
        ],
    ],
]
CurriedEightArgumentFunction = Function[
    _A,
    Function[
        _B,
        Function[
            _C,
            Function[
                _D, Function[_E, Function[_F, Function[_G, Function[_H, _I]]]]
            ],
        ],
    ],
]
