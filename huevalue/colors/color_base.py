from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple


class ColorBase:
    """
    Immutable slotted value.

    Subclasses list their public field names in ``fields`` and store each one
    in a ``_<name>`` slot. Names in ``state`` are stored the same way but take
    no part in equality, hashing or repr. Slots are written through
    :meth:`_assign` while the instance is being built; afterwards every write
    raises ``AttributeError``.
    """
    __slots__ = ('_is_frozen',)  # subclasses add their own slots, no __dict__

    fields: ClassVar[Tuple[str, ...]] = ()
    state: ClassVar[Tuple[str, ...]] = ()

    def __setattr__(self, name, value):
        """Block attribute changes after construction finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _assign(self, **values: Any) -> None:
        for name in self.fields + self.state:
            super().__setattr__(f'_{name}', values[name])
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ VALUE SEMANTICS ------------------
    def as_tuple(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f'_{name}') for name in self.fields)

    def _slot_values(self) -> Dict[str, Any]:
        return {name: getattr(self, f'_{name}') for name in self.fields + self.state}

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.as_tuple() == other.as_tuple()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.__class__.__name__,) + self.as_tuple())

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={getattr(self, f'_{name}')!r}" for name in self.fields)
        return f"{self.__class__.__name__}({body})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_rebuild, (self.__class__, self._slot_values()))


def _rebuild(cls: type[ColorBase], values: Dict[str, Any]) -> ColorBase:
    obj = cls.__new__(cls)
    obj._assign(**values)
    return obj
