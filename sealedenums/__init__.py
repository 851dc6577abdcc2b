from . import (
    enum_group,
    enum_meta_properties,
    errors,
    registry,
    utils,
    value_kind,
)

from .enum_group import EnumGroup
from .errors import (
    AlreadySealedError,
    DuplicateDescriptionError,
    DuplicateRegistrationError,
    EnumError,
    IllegalInstantiationError,
)
from .registry import DEFAULT_REGISTRY, EnumRegistry
from .value_kind import ValueKind

from ._version import __version__
