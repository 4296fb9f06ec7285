"""Getters and copying updaters for (possibly dotted) attribute paths."""

import copy
import dataclasses
import operator
from typing import Any, Callable, List, Sequence, TypeVar

_T = TypeVar('_T')


def attribute_getter(path: str) -> Callable[[Any], Any]:
    return operator.attrgetter(path)


def split_path(path: str) -> List[str]:
    names = path.split('.')
    if not all(names):
        raise ValueError('invalid attribute path {!r}'.format(path))
    return names


def attribute_updater(
    names: Sequence[str], transformation: Callable[[Any], Any]
) -> Callable[[_T], _T]:
    """Return a function that copies its input with the attribute at the path
    given by names replaced by transformation applied to the old value.

    Every object along the path is copied; the input is never modified.
    """

    def update(root: _T) -> _T:
        return _replaced(root, names, transformation)

    return update


def _replaced(
    obj: _T, names: Sequence[str], transformation: Callable[[Any], Any]
) -> _T:
    name, rest = names[0], names[1:]
    old = getattr(obj, name)
    if rest:
        new = _replaced(old, rest, transformation)
    else:
        new = transformation(old)
    return _copy_with(obj, name, new)


def _copy_with(obj: _T, name: str, value: Any) -> _T:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        field_names = {field.name for field in dataclasses.fields(obj)}
        if name in field_names:
            return dataclasses.replace(obj, **{name: value})
    # namedtuple fields are read-only properties
    if name in getattr(type(obj), '_fields', ()):
        return obj._replace(**{name: value})  # type: ignore
    duplicate = copy.copy(obj)
    setattr(duplicate, name, value)
    return duplicate
