"""
Contains the errors raised while composing rules and the failures reported while validating
"""
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

ObjT = TypeVar("ObjT")


class ArgumentNullError(ValueError):
    """
    Raised if a required collaborator (a validator, a resolved instance, ...) is missing.
    The message names the fluent operation which got misused.
    """

    def __init__(self, message: str, param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name


def guard(obj: Optional[ObjT], message: str, param_name: str = "validator") -> ObjT:
    """
    Returns `obj` unchanged if it is not None. Otherwise, an ArgumentNullError with the provided message is raised.
    """
    if obj is None:
        raise ArgumentNullError(message, param_name)
    return obj


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single failed check of a property validator
    """

    property_name: str
    error_message: str
    attempted_value: Any = None

    def __str__(self):
        return f"{self.property_name}: {self.error_message}"
