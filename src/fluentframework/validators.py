"""
A small set of ready-to-use validator units.
"""
from collections.abc import Sized
from typing import Any, Callable, Optional

from .property_validator import PropertyValidator, PropertyValidatorContext


class NotNullValidator(PropertyValidator[Any]):
    """Fails if the value is None"""

    error_message = "'{property_name}' must not be empty."

    def is_valid(self, value: Any) -> bool:
        return value is not None


class NotEmptyValidator(PropertyValidator[Any]):
    """Fails if the value is None, an empty sized object or a whitespace-only string"""

    error_message = "'{property_name}' should not be empty."

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if isinstance(value, Sized):
            return len(value) > 0
        return True


class InclusiveBetweenValidator(PropertyValidator[Any]):
    """
    Fails if the value is not within `from_` and `to` (both inclusive). None values pass; combine it with a
    NotNullValidator if the value is required.
    """

    error_message = "'{property_name}' must be between {from_} and {to}. You entered {property_value}."
    placeholders = frozenset({"from_", "to"})

    def __init__(self, from_: Any, to: Any, error_message: Optional[str] = None):
        if to < from_:
            raise ValueError(f"to ({to}) must not be smaller than from_ ({from_})")
        super().__init__(error_message)
        self.from_ = from_
        self.to = to

    def is_valid(self, value: Any) -> bool:
        return value is None or self.from_ <= value <= self.to

    def message_arguments(self) -> dict[str, Any]:
        return {"from_": self.from_, "to": self.to}


class LengthValidator(PropertyValidator[Optional[Sized]]):
    """
    Fails if the length of the value is not within `min_` and `max_`. If `max_` is None, only the lower bound is
    checked.
    """

    error_message = "'{property_name}' must be between {min_} and {max_} characters. You entered {length} characters."
    placeholders = frozenset({"min_", "max_", "length"})

    def __init__(self, min_: int, max_: Optional[int] = None, error_message: Optional[str] = None):
        if max_ is not None and max_ < min_:
            raise ValueError(f"max_ ({max_}) must not be smaller than min_ ({min_})")
        super().__init__(error_message)
        self.min_ = min_
        self.max_ = max_

    def is_valid(self, value: Optional[Sized]) -> bool:
        if value is None:
            return True
        return self.min_ <= len(value) and (self.max_ is None or len(value) <= self.max_)

    def message_arguments(self) -> dict[str, Any]:
        return {"min_": self.min_, "max_": self.max_}

    def format_message(self, context: PropertyValidatorContext) -> str:
        return self.error_message.format(
            property_name=context.display_name,
            property_value=context.property_value,
            length=len(context.property_value),
            **self.message_arguments(),
        )


class PredicateValidator(PropertyValidator[Any]):
    """Wraps an arbitrary predicate function"""

    error_message = "The specified condition was not met for '{property_name}'."

    def __init__(self, predicate: Callable[[Any], bool], error_message: Optional[str] = None):
        super().__init__(error_message)
        self.predicate = predicate

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))
