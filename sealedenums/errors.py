"""Exceptions raised while sealing enum groups or constructing their members"""


class EnumError(Exception):
    """Base class for all errors raised by sealedenums."""


class DuplicateRegistrationError(EnumError, ValueError):
    """An enum group was sealed under a registration name that is already in use."""


class DuplicateDescriptionError(EnumError, ValueError):
    """Two or more members of one enum group share a description."""


class IllegalInstantiationError(EnumError, TypeError):
    """A ValueKind type was instantiated after an enum group holding it had been sealed."""


class AlreadySealedError(EnumError, RuntimeError):
    """
    Sealing was attempted on something which is already sealed: either the group itself, or a member which
    belongs to another, already sealed, group.
    """
