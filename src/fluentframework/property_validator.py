"""
Contains the base class of all validator units. A validator unit is an already configured predicate for the value of
a single property; it knows nothing about how it got attached to a rule.
"""
import re
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional

from .errors import ValidationFailure
from .types import PropertyT

if TYPE_CHECKING:
    from .property_rule import PropertyRule


def _placeholder_names(template: str) -> set[str]:
    return {
        re.split(r"[.\[]", field_name, maxsplit=1)[0]
        for _, field_name, _, _ in string.Formatter().parse(template)
        if field_name is not None
    }


@dataclass(frozen=True)
class PropertyValidatorContext:
    """
    Everything a validator unit gets to see while a rule is executed
    """

    rule: "PropertyRule[Any]"
    instance: Any
    property_value: Any
    property_path: str

    @property
    def display_name(self) -> str:
        """The name used in error messages"""
        return self.rule.get_display_name()


class PropertyValidator(ABC, Generic[PropertyT]):
    """
    Base class for validator units. Subclasses implement `is_valid` and may override `error_message` or
    `message_arguments` to control the failure message.
    """

    error_message: str = "'{property_name}' is not valid."
    placeholders: ClassVar[frozenset[str]] = frozenset()
    """Placeholders besides `property_name` and `property_value` which `format_message` fills"""

    def __init__(self, error_message: Optional[str] = None):
        if error_message is not None:
            unknown = _placeholder_names(error_message) - self.placeholders - {"property_name", "property_value"}
            if unknown:
                raise ValueError(f"{type(self).__name__} cannot fill the placeholder(s) {sorted(unknown)}")
            self.error_message = error_message

    @abstractmethod
    def is_valid(self, value: PropertyT) -> bool:
        """Returns True if the property value passes this check"""

    def message_arguments(self) -> dict[str, Any]:
        """Additional placeholders available in `error_message`"""
        return {}

    def format_message(self, context: PropertyValidatorContext) -> str:
        """Fills the placeholders of `error_message`"""
        return self.error_message.format(
            property_name=context.display_name,
            property_value=context.property_value,
            **self.message_arguments(),
        )

    def validate(self, context: PropertyValidatorContext) -> list[ValidationFailure]:
        """
        Runs the check against the property value of the context and returns the resulting failures
        (an empty list if the value is valid).
        """
        if self.is_valid(context.property_value):
            return []
        return [ValidationFailure(context.property_path, self.format_message(context), context.property_value)]

    def __str__(self):
        return type(self).__name__
