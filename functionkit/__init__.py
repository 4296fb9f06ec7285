"""Composable wrappers around one-argument functions."""

version = '0.1.0'

from functionkit.errors import (
    ArityError,
    FunctionKitError,
    ImmutableAttributeError,
)
from functionkit.function import (
    CurriedEightArgumentFunction,
    CurriedFiveArgumentFunction,
    CurriedFourArgumentFunction,
    CurriedSevenArgumentFunction,
    CurriedSixArgumentFunction,
    CurriedThreeArgumentFunction,
    CurriedTwoArgumentFunction,
    Function,
    chain,
    composition,
    concatenation,
    pipeline,
    promote,
)
from functionkit.mutator import Mutator, Ref

__all__ = [
    'ArityError',
    'CurriedEightArgumentFunction',
    'CurriedFiveArgumentFunction',
    'CurriedFourArgumentFunction',
    'CurriedSevenArgumentFunction',
    'CurriedSixArgumentFunction',
    'CurriedThreeArgumentFunction',
    'CurriedTwoArgumentFunction',
    'Function',
    'FunctionKitError',
    'ImmutableAttributeError',
    'Mutator',
    'Ref',
    'chain',
    'composition',
    'concatenation',
    'pipeline',
    'promote',
    'version',
]
