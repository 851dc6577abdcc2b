from .errors import IllegalInstantiationError

# Side table of concrete ValueKind types which have been sealed into an EnumGroup. Membership is by exact type:
# a subclass of a sealed type is not itself sealed.
_sealed_types: set = set()


def mark_sealed(cls: type) -> None:
    """Close a concrete type to further instantiation. Called only by EnumGroup sealing."""
    _sealed_types.add(cls)


def is_sealed(cls: type) -> bool:
    return cls in _sealed_types


class EnumMetaProperties(type):
    """
    Metaclass for enum member types. Once a type has been sealed (see mark_sealed()), this metaclass:
     - rejects any attempt to construct a further instance of it, raising IllegalInstantiationError. This stops
       rogue members being injected into an enum after its initial definition.
     - intercepts attempts to set or delete *class* attributes, and rejects them.
    It also defines the class string representation as being *just* the class name, without any fluff.
    """

    def __call__(cls, *args, **kwargs):
        if is_sealed(cls):
            raise IllegalInstantiationError(
                f"{cls.__name__} has been sealed into an enum and can't be instantiated individually"
            )
        return super().__call__(*args, **kwargs)

    def __setattr__(cls, name: str, value) -> None:
        if is_sealed(cls):
            raise AttributeError(f"Attributes of {cls} act as constants. Do not modify them.")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if is_sealed(cls):
            raise AttributeError(f"Attributes of {cls} act as constants. Do not delete them.")
        super().__delattr__(name)

    def __repr__(cls) -> str:
        return f"{cls.__name__}"
