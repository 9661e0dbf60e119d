"""
Contains the protocol every whole-object validator has to fulfill to be used as child validator or as source of
imported rules.
"""
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .analysis import ValidationResult
    from .descriptor import ValidatorDescriptor


@runtime_checkable
class ValidatorProtocol(Protocol):
    """
    A validator which validates whole objects (in contrast to a PropertyValidator which validates a single value).
    """

    def validate(self, instance: Any) -> "ValidationResult":
        """Validates all rules against `instance`"""
        ...

    def create_descriptor(self) -> "ValidatorDescriptor":
        """Returns a read-only view on the registered rules"""
        ...
