"""
Contains the adapter which turns a whole-object validator into a single validator unit of a property.
"""
from typing import Any

from .errors import ValidationFailure
from .property_rule import PropertyRule
from .property_validator import PropertyValidator, PropertyValidatorContext
from .protocols import ValidatorProtocol


class ChildValidatorAdaptor(PropertyValidator[Any]):
    """
    Runs `validator` against the value of the property. A None value is valid since there is nothing to descend into.
    The failures of the child validator are reported with the property path as prefix.
    """

    def __init__(self, validator: ValidatorProtocol):
        super().__init__()
        self.validator = validator

    def is_valid(self, value: Any) -> bool:
        return value is None or self.validator.validate(value).is_valid

    def validate(self, context: PropertyValidatorContext) -> list[ValidationFailure]:
        if context.property_value is None:
            return []
        result = self.validator.validate(context.property_value)
        return [
            ValidationFailure(
                f"{context.property_path}.{failure.property_name}", failure.error_message, failure.attempted_value
            )
            for failure in result.errors
        ]

    def __str__(self):
        return f"ChildValidatorAdaptor({type(self.validator).__name__})"


def infer_property_validator_for_child_validator(
    rule: PropertyRule[Any], validator: ValidatorProtocol
) -> PropertyValidator[Any]:
    """
    Returns the validator unit which runs `validator` for the property of `rule`.
    The adaptor reads the property path from the validation context, so `rule` is only part of the adapter signature.
    """
    # pylint: disable=unused-argument
    return ChildValidatorAdaptor(validator)
