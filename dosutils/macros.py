"""Named text macros of the form ``%NAME%`` kept in a bounded table."""

from __future__ import annotations

from collections.abc import Iterator

MAX_DEFINES = 30
_DELIMITERS = (" ", "=")


class DefineError(ValueError):
    """Raised when a definition cannot be added to the table."""


def split_definition(spec: str) -> tuple[str, str]:
    """Split ``NAME VALUE`` or ``NAME=VALUE`` at the first delimiter.

    A spec without a delimiter defines the name with an empty value.
    """
    cut = min((spec.find(d) for d in _DELIMITERS if d in spec), default=-1)
    if cut < 0:
        return spec, ""
    return spec[:cut], spec[cut + 1:]


class DefineTable:
    """A fixed number of slots holding name/value definitions.

    A removed definition frees its slot, which the next new definition
    takes over; substitution follows slot order.
    """

    def __init__(self, capacity: int = MAX_DEFINES) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[tuple[str, str] | None] = []

    def _index(self, name: str) -> int | None:
        for index, entry in enumerate(self._slots):
            if entry is not None and entry[0] == name:
                return index
        return None

    def add(self, spec: str, override: bool = False) -> None:
        """Define the name given by *spec*; replace an existing one only if *override*."""
        name, value = split_definition(spec)
        if not name:
            raise DefineError(f"Missing name in definition: {spec!r}")
        index = self._index(name)
        if index is not None:
            if not override:
                raise DefineError(f"Already defined: {name}")
            self._slots[index] = (name, value)
            return
        try:
            free = self._slots.index(None)
        except ValueError:
            if len(self._slots) >= self.capacity:
                raise DefineError(f"No more #defines allowed: {spec}") from None
            self._slots.append((name, value))
        else:
            self._slots[free] = (name, value)

    def remove(self, name: str) -> bool:
        """Remove *name*; return whether it was defined."""
        index = self._index(name)
        if index is None:
            return False
        self._slots[index] = None
        return True

    def is_defined(self, name: str) -> bool:
        """Return whether *name* is defined."""
        return self._index(name) is not None

    def value(self, name: str) -> str:
        """Return the value of *name*; raise KeyError if it is not defined."""
        index = self._index(name)
        if index is None:
            raise KeyError(name)
        entry = self._slots[index]
        assert entry is not None
        return entry[1]

    def substitute(self, line: str) -> str:
        """Replace every ``%NAME%`` in *line* with its value."""
        for name, value in self.items():
            line = line.replace(f"%{name}%", value)
        return line

    def items(self) -> list[tuple[str, str]]:
        """Return the (name, value) pairs in slot order."""
        return [entry for entry in self._slots if entry is not None]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_defined(name)

    def __len__(self) -> int:
        return len(self.items())

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.items())