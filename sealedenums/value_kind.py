from typing import Optional

from .enum_meta_properties import EnumMetaProperties


# Abstract base class for enum members. Leverages the EnumMetaProperties metaclass to close a concrete member type
# to further instantiation once an EnumGroup holding it has been sealed.
class ValueKind(metaclass=EnumMetaProperties):
    """
    An instance of an enum. For example, given an enumeration of seasons, WINTER would be a ValueKind.

    Subclass this once per kind of enum member, then attach instances of the subclass to an EnumGroup. Ordinal and
    property name are unset (None) until the owning EnumGroup is sealed, after which the instance is frozen.
    """

    def __init__(self, description: str):
        if type(self) is ValueKind:
            raise TypeError("ValueKind is abstract. Subclass it rather than instantiating it directly.")
        self._description = description
        self._ordinal: Optional[int] = None
        self._prop_name: Optional[str] = None
        self._frozen = False

    @property
    def description(self) -> str:
        """
        The description of the instance passed into the constructor. May be the same as the prop_name.
        """
        return self._description

    @property
    def ordinal(self) -> Optional[int]:
        """
        The 0-based index of the instance in its enum, in declaration order. None until sealed.
        """
        return self._ordinal

    @property
    def prop_name(self) -> Optional[str]:
        """
        The attribute name this instance was found under in its enum. None until sealed.
        """
        return self._prop_name

    @property
    def sealed(self) -> bool:
        return self._frozen

    def _seal(self, ordinal: int, prop_name: str) -> None:
        # Only EnumGroup.init_enum() should call this, after all validation has passed.
        object.__setattr__(self, "_ordinal", ordinal)
        object.__setattr__(self, "_prop_name", prop_name)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self} is a sealed enum member. Do not modify it.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self} is a sealed enum member. Do not delete its attributes.")
        super().__delattr__(name)

    # Members are singletons. copy and pickle build objects via __new__, bypassing the instantiation guard, so copying
    # hands back the member itself and pickling is refused.
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} enum members can't be pickled")

    def __str__(self) -> str:
        return f"{type(self).__name__}.{self._prop_name}"

    def __repr__(self) -> str:
        return f"<{self}: {self._description!r}>"
