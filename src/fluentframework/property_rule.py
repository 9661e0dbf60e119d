"""
Contains the PropertyRule which accumulates the validator units of one property of one subject type.
"""
import logging
from typing import Any, Callable, Generic, Optional

from .errors import ValidationFailure, guard
from .property_validator import PropertyValidator, PropertyValidatorContext
from .types import MemberAccessor, SubjectT
from .utils.member import get_member_path, required_field

_logger = logging.getLogger(__name__)


class PropertyRule(Generic[SubjectT]):
    """
    Holds the ordered validator units bound to one property. The insertion order is the evaluation order and the same
    unit may be added more than once.
    """

    def __init__(
        self,
        property_name: str,
        property_func: Optional[Callable[[SubjectT], Any]] = None,
        display_name: Optional[str] = None,
    ):
        self._property_name = property_name
        self._property_func = property_func
        self._validators: list[PropertyValidator[Any]] = []
        self.display_name: Optional[str] = display_name

    @classmethod
    def create(cls, accessor: MemberAccessor) -> "PropertyRule[SubjectT]":
        """
        Creates a rule for the member the `accessor` points to. The property value will be queried by the resulting
        member path.
        """
        return cls(get_member_path(accessor))

    @property
    def property_name(self) -> str:
        """The stable (dotted) name of the property"""
        return self._property_name

    @property
    def validators(self) -> tuple[PropertyValidator[Any], ...]:
        """Snapshot of the validator units in evaluation order"""
        return tuple(self._validators)

    def add_validator(self, validator: PropertyValidator[Any]) -> None:
        """Appends a validator unit. None is rejected before anything gets appended."""
        self._validators.append(guard(validator, "Cannot add a null validator to a property rule."))

    def get_display_name(self) -> str:
        """Returns the display name if one is set, otherwise the property name"""
        if self.display_name is not None:
            return self.display_name
        return self._property_name

    def get_property_value(self, instance: SubjectT) -> Any:
        """Reads the value of this rule's property from `instance`"""
        if self._property_func is not None:
            return self._property_func(instance)
        return required_field(instance, self._property_name)

    def validate(self, instance: SubjectT) -> list[ValidationFailure]:
        """Runs every validator unit against the property value of `instance` and returns all failures in order."""
        context = PropertyValidatorContext(
            rule=self,
            instance=instance,
            property_value=self.get_property_value(instance),
            property_path=self._property_name,
        )
        failures: list[ValidationFailure] = []
        for validator in self._validators:
            failures.extend(validator.validate(context))
        _logger.debug("Rule for '%s' produced %i failure(s)", self._property_name, len(failures))
        return failures

    def __str__(self):
        return f"PropertyRule({self._property_name}, [{', '.join(str(v) for v in self._validators)}])"
