import logging as _logging
import threading

from typing import Iterable, List, Tuple

from .errors import DuplicateRegistrationError
from .value_kind import ValueKind


class EnumRegistry:
    """
    Maps registration names to the ordered members of sealed enum groups.

    The registry is write-once per name: entries are only ever added (by EnumGroup sealing), never replaced or
    removed. Registration is protected by a lock. Reads take no lock, as stored entries are immutable tuples.
    """

    def __init__(self):
        # Re-entrant, so EnumGroup sealing can hold it across validation and register()
        self.lock = threading.RLock()
        self._values: dict = {}

    def register(self, name: str, values: Iterable[ValueKind]) -> None:
        """Store the ordered members of a sealed enum under its registration name

        :param str name: Registration name, must not already be registered
        :param Iterable[ValueKind] values: Members in ordinal order
        :raises DuplicateRegistrationError: if name is already registered. The registry is left unchanged.
        """
        with self.lock:
            self.check_available(name)
            self._values[name] = tuple(values)
        _logging.debug(f"Registered enum '{name}' with {len(self._values[name])} values")

    def check_available(self, name: str) -> None:
        if name in self._values:
            raise DuplicateRegistrationError(f"Duplicate name: {name}")

    def values(self, name: str) -> List[ValueKind]:
        """
        Returns a defensively-copied list of the members registered under name, or an empty list if nothing is
        registered under it.
        """
        return list(self._values.get(name, ()))

    def names(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def __contains__(self, name) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnumRegistry({list(self._values)})"


# Process-wide registry, used by every EnumGroup unless another is passed to init_enum()
DEFAULT_REGISTRY = EnumRegistry()
