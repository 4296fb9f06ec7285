from functionkit.errors import ImmutableAttributeError


class SetOnce[T]:
    """A data descriptor for attributes that are assigned exactly once,
    normally in __init__, and never replaced or deleted afterwards."""

    def __set_name__(self, owner, name: str) -> None:
        self._name = name
        self._storage_name = f'_SetOnce_{name}'

    def __get__(self, instance, owner=None) -> T:
        if instance is None:
            return self  # type: ignore
        return getattr(instance, self._storage_name)

    def __set__(self, instance, value: T) -> None:
        if hasattr(instance, self._storage_name):
            raise ImmutableAttributeError(self._name)
        setattr(instance, self._storage_name, value)

    def __delete__(self, instance) -> None:
        raise ImmutableAttributeError(self._name)
