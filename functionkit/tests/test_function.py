from functionkit import Function, ImmutableAttributeError
from functionkit.tests.strategies import hashable_values, int_combinators
from hypothesis import given
import hypothesis.strategies as st
from typing import List
import unittest


class TestApply(unittest.TestCase):
    @given(st.integers())
    def test_apply_calls_transformation(self, x: int) -> None:
        self.assertEqual(x + 1, Function(lambda y: y + 1).apply(x))

    @given(st.integers())
    def test_call_is_apply(self, x: int) -> None:
        f = Function(lambda y: y * 3)
        self.assertEqual(f.apply(x), f(x))

    def test_several_arguments_are_packed(self) -> None:
        received: List[object] = []
        f = Function(received.append)
        f.apply(1, 'a', None)
        self.assertEqual([(1, 'a', None)], received)

    def test_single_tuple_is_not_repacked(self) -> None:
        f = Function(lambda pair: pair[0] + pair[1])
        self.assertEqual(3, f.apply((1, 2)))
        self.assertEqual(3, f.apply(1, 2))

    def test_no_arguments_is_unit(self) -> None:
        self.assertEqual((), Function.identity().apply())

    def test_failure_propagates_unchanged(self) -> None:
        error = ZeroDivisionError('boom')

        def fail(_: object) -> None:
            raise error

        with self.assertRaises(ZeroDivisionError) as cm:
            Function(fail).pipe(lambda x: x).apply(0)
        self.assertIs(error, cm.exception)

    def test_transformation_cannot_be_replaced(self) -> None:
        f = Function(lambda x: x)
        with self.assertRaises(ImmutableAttributeError):
            f._transformation = lambda x: 0
        with self.assertRaises(AttributeError):
            del f._transformation
        self.assertEqual(5, f.apply(5))

    def test_repr(self) -> None:
        def double(x: int) -> int:
            return 2 * x

        self.assertEqual(
            'Function(TestApply.test_repr.<locals>.double)',
            repr(Function(double)),
        )


class TestCommonFunctions(unittest.TestCase):
    @given(hashable_values)
    def test_identity(self, x: object) -> None:
        self.assertIs(x, Function.identity().apply(x))

    @given(st.integers(), hashable_values)
    def test_constant(self, value: int, ignored: object) -> None:
        self.assertEqual(value, Function.constant(value).apply(ignored))

    @given(hashable_values)
    def test_constant_piped_into_identity(self, anything: object) -> None:
        f = Function.constant(5).pipe(Function.identity())
        self.assertEqual(5, f.apply(anything))

    @given(int_combinators, st.integers())
    def test_identity_laws(self, f: Function[int, int], x: int) -> None:
        self.assertEqual(f.apply(x), Function.identity().pipe(f).apply(x))
        self.assertEqual(f.apply(x), f.pipe(Function.identity()).apply(x))
