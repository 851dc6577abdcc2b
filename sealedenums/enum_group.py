import logging as _logging
from collections import Counter
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .enum_meta_properties import mark_sealed
from .errors import AlreadySealedError, DuplicateDescriptionError
from .registry import DEFAULT_REGISTRY, EnumRegistry
from .value_kind import ValueKind

if TYPE_CHECKING:
    import pandas as _pd
    from typing_extensions import Literal as _Literal

V = TypeVar("V", bound=ValueKind)


class EnumGroup(Generic[V]):
    """
    Abstract base for an enumeration: a closed, sealed set of ValueKind members. Not intended to be used directly.

    Subclass it, assign the members as attributes in __init__(), and call self.init_enum() as the final step:

        class Seasons(EnumGroup[Season]):
            def __init__(self):
                self.SPRING = Season("Spring")
                self.SUMMER = Season("Summer")
                self.init_enum("Season")

    Ordinals follow declaration order (the order in which the attributes were first assigned), not the order the
    members were constructed in.

    Note that sealing doesn't prevent everything. Attribute assignment and deletion are rejected, but writing to the
    instance __dict__ directly (e.g. vars(group)["X"] = ...) is not intercepted. Such writes never reach values or the
    lookups, which read only from the registry.
    """

    # Class level defaults, so subclasses needn't call super().__init__()
    _name: Optional[str] = None
    _registry: EnumRegistry = DEFAULT_REGISTRY
    _frozen: bool = False

    def init_enum(
        self,
        name: str,
        members: Optional[Iterable[Tuple[str, V]]] = None,
        registry: Optional[EnumRegistry] = None,
    ) -> None:
        """Seal the enum: index, validate, freeze and register its members, and close their types to instantiation

        :param str name: Registration name. Must be unique within the registry
        :param Iterable[Tuple[str, V]] members: (optional) explicit (prop_name, member) pairs in declaration order.
         They are bound as attributes of the enum. By default, members are discovered from the enum's own attributes.
        :param EnumRegistry registry: (optional) registry to seal into, defaults to the process-wide DEFAULT_REGISTRY
        :raises ValueError: if name is None or effectively empty
        :raises DuplicateRegistrationError: if name is already registered
        :raises AlreadySealedError: if this enum, or any of its members, has already been sealed
        :raises DuplicateDescriptionError: if two members share a description
        """
        if type(self) is EnumGroup:
            raise TypeError("EnumGroup is abstract. Subclass it to define an enum.")
        if not isinstance(name, str) or len(name.strip()) == 0:
            raise ValueError("Enum registration name passed was None or effectively empty!", name)
        if registry is None:
            registry = self._registry

        # Nothing is modified until all validation has passed, so failure leaves the enum, its members and the
        # registry untouched.
        with registry.lock:
            registry.check_available(name)
            if self._frozen:
                raise AlreadySealedError(f"{type(self).__name__} is already sealed as '{self._name}'")

            if members is None:
                found = self._discover_members()
            else:
                found = self._check_explicit_members(members)
            for prop_name, value in found:
                if value.sealed:
                    raise AlreadySealedError(f"{value} already belongs to a sealed enum, can't add it as {prop_name}")
            self._check_unique_descriptions(name, found)

            if members is not None:
                for prop_name, value in found:
                    setattr(self, prop_name, value)
            values = []
            for ordinal, (prop_name, value) in enumerate(found):
                value._seal(ordinal, prop_name)
                values.append(value)
            for kind in {type(value) for value in values}:
                mark_sealed(kind)
            registry.register(name, values)

            object.__setattr__(self, "_name", name)
            object.__setattr__(self, "_registry", registry)
            object.__setattr__(self, "_frozen", True)
        _logging.debug(f"Sealed enum {type(self).__name__} as '{name}' with {len(values)} values")

    def _discover_members(self) -> List[Tuple[str, V]]:
        # vars() preserves attribute insertion order, which is what defines the ordinals
        return [(prop_name, value) for prop_name, value in vars(self).items() if isinstance(value, ValueKind)]

    def _check_explicit_members(self, members: Iterable[Tuple[str, V]]) -> List[Tuple[str, V]]:
        found = list(members)
        seen = set()
        for prop_name, value in found:
            if not isinstance(value, ValueKind):
                raise TypeError(f"Enum member {prop_name} must be a ValueKind, got {type(value).__name__}")
            if hasattr(type(self), prop_name):
                raise ValueError(f"Enum member name {prop_name} would shadow an attribute of {type(self).__name__}")
            if prop_name in vars(self) and vars(self)[prop_name] is not value:
                raise ValueError(f"Enum member name {prop_name} would overwrite an existing attribute", prop_name)
            if prop_name in seen:
                raise ValueError(f"Enum member name {prop_name} given more than once", prop_name)
            seen.add(prop_name)
        return found

    def _check_unique_descriptions(self, name: str, found: List[Tuple[str, V]]) -> None:
        counts = Counter(value.description for _, value in found)
        duplicates = [description for description, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateDescriptionError(
                "All descriptions must be unique for a given enum type. "
                f"Instead, there are multiples in {type(self).__name__} ('{name}'): {duplicates}"
            )

    @property
    def name(self) -> Optional[str]:
        """The registration name, or None if the enum has not been sealed"""
        return self._name

    @property
    def sealed(self) -> bool:
        return self._frozen

    @property
    def values(self) -> List[V]:
        """
        Return a defensively-copied list of all the members of the enum, in ordinal order. Empty if not yet sealed.
        """
        if self._name is None:
            return []
        return self._registry.values(self._name)

    def by_prop_name(self, prop_name: str) -> Optional[V]:
        """
        Given the property name of an enum constant, return its value, or None if there is no such member.
        """
        return next((value for value in self.values if value.prop_name == prop_name), None)

    def by_description(self, description: str) -> Optional[V]:
        """
        Given the description of an enum constant, return its value, or None if there is no such member.
        """
        return next((value for value in self.values if value.description == description), None)

    def categorical_dtype(self) -> "_pd.CategoricalDtype":
        # frames (and so pandas) is only loaded when a view is asked for
        from . import frames

        return frames.categorical_dtype(self.values)

    def to_frame(self, index: '_Literal["ordinal", "prop_name"]' = "ordinal") -> "_pd.DataFrame":
        from . import frames

        return frames.values_to_frame(self.values, index=index)

    def __iter__(self) -> Iterator[V]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value) -> bool:
        return any(value is member for member in self.values)

    def __setattr__(self, name: str, value) -> None:
        if self._frozen:
            raise AttributeError(f"Enum {self} is sealed. Its attributes can't be modified.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._frozen:
            raise AttributeError(f"Enum {self} is sealed. Its attributes can't be deleted.")
        super().__delattr__(name)

    def __str__(self) -> str:
        if self._name is None:
            return type(self).__name__
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self}': {[str(value) for value in self.values]}>"
