"""
Contains the fluent RuleBuilder which attaches validator units to a single PropertyRule.

The builder is handed out under two capability views: `RuleBuilderInitial` right after `rule_for` and
`RuleBuilderOptions` after the first attachment. Both are implemented by the very same `RuleBuilder` object wrapping
the very same rule; only the options view offers `configure`.
"""
import logging
from typing import Any, Callable, Generic, Optional, Protocol, overload

from .child_adapter import infer_property_validator_for_child_validator
from .constructor import default_constructor, resolve
from .errors import guard
from .property_rule import PropertyRule
from .property_validator import PropertyValidator
from .protocols import ValidatorProtocol
from .types import Configurator, Constructor, ModelT, PropertyT, SubjectT
from .utils.member import get_member_path

_logger = logging.getLogger(__name__)


class RuleBuilderInitial(Protocol[SubjectT, PropertyT]):
    """
    The operations available before any validator got attached
    """

    @property
    def rule(self) -> PropertyRule[SubjectT]:
        ...

    @overload
    def set_validator(self, validator: PropertyValidator[PropertyT]) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...

    @overload
    def set_validator(self, validator: ValidatorProtocol) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...

    def set_validator(self, validator: Any) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...

    def set_validator_type(self, validator_type: type[ValidatorProtocol]) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...

    def using(self, validator_type: type[PropertyValidator[PropertyT]]) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...

    def using_rule_from(
        self,
        validator_type: type[ValidatorProtocol],
        accessor: Optional[Callable[[ModelT], PropertyT] | str] = None,
    ) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...


class RuleBuilderOptions(RuleBuilderInitial[SubjectT, PropertyT], Protocol[SubjectT, PropertyT]):
    """
    The operations available once at least one validator got attached
    """

    def configure(self, configurator: Configurator) -> "RuleBuilderOptions[SubjectT, PropertyT]":
        ...


class RuleBuilder(Generic[SubjectT, PropertyT]):
    """
    Builds a validation rule for the property of type `PropertyT` of the subject type `SubjectT`.
    Every operation returns the builder itself (typed as `RuleBuilderOptions`) to allow chaining.
    Validators are never instantiated directly but resolved through the `constructor`.
    """

    def __init__(self, rule: PropertyRule[SubjectT], constructor: Constructor = default_constructor):
        self._rule = rule
        self._constructor = constructor

    @property
    def rule(self) -> PropertyRule[SubjectT]:
        """The rule this builder appends to"""
        return self._rule

    def _add(self, validator: Optional[PropertyValidator[Any]], operation: str) -> None:
        """
        Every attachment ends up here. The rule stays untouched if `validator` is None.
        """
        self._rule.add_validator(guard(validator, f"Cannot pass a null validator to {operation}."))
        _logger.debug("%s: added %s to rule for '%s'", operation, validator, self._rule.property_name)

    @overload
    def set_validator(self, validator: PropertyValidator[PropertyT]) -> RuleBuilderOptions[SubjectT, PropertyT]:
        ...

    @overload
    def set_validator(self, validator: ValidatorProtocol) -> RuleBuilderOptions[SubjectT, PropertyT]:
        ...

    def set_validator(self, validator: Any) -> RuleBuilderOptions[SubjectT, PropertyT]:
        """
        Attaches a validator unit. If `validator` is a whole-object validator instead (use this for complex
        properties), it gets wrapped into a unit which validates the property value with it.
        """
        guard(validator, "Cannot pass a null validator to set_validator.")
        if isinstance(validator, type):
            raise TypeError(
                f"set_validator expects a validator instance but got the class {validator.__name__}. "
                "Use set_validator_type or using to attach a validator by its type."
            )
        if isinstance(validator, PropertyValidator):
            self._add(validator, "set_validator")
        elif isinstance(validator, ValidatorProtocol):
            self._add(infer_property_validator_for_child_validator(self._rule, validator), "set_validator")
        else:
            raise TypeError(f"{validator!r} is neither a PropertyValidator nor a validator of whole objects")
        return self

    def set_validator_type(self, validator_type: type[ValidatorProtocol]) -> RuleBuilderOptions[SubjectT, PropertyT]:
        """
        Resolves an instance of `validator_type` and attaches it as child validator (see `set_validator`).
        """
        validator = resolve(self._constructor, validator_type, "set_validator_type", ValidatorProtocol)
        self._add(infer_property_validator_for_child_validator(self._rule, validator), "set_validator_type")
        return self

    def using(self, validator_type: type[PropertyValidator[PropertyT]]) -> RuleBuilderOptions[SubjectT, PropertyT]:
        """
        Resolves an instance of the validator unit type `validator_type` and attaches it.
        """
        self._add(resolve(self._constructor, validator_type, "using", PropertyValidator), "using")
        return self

    def using_rule_from(
        self,
        validator_type: type[ValidatorProtocol],
        accessor: Optional[Callable[[ModelT], PropertyT] | str] = None,
    ) -> RuleBuilderOptions[SubjectT, PropertyT]:
        """
        Copies the validator units another validator registered for a member. The member is given by `accessor`
        (which may point into a different model); without accessor the member with the same name as this rule's
        property is used.
        """
        member_name = self._rule.property_name if accessor is None else get_member_path(accessor)
        validator = resolve(self._constructor, validator_type, "using_rule_from", ValidatorProtocol)
        units = validator.create_descriptor().get_validators_for_member(member_name)
        _logger.debug(
            "Importing %i validator(s) of %s.%s into rule for '%s'",
            len(units),
            validator_type.__name__,
            member_name,
            self._rule.property_name,
        )
        for unit in units:
            self._add(unit, "using_rule_from")
        return self

    def configure(self, configurator: Configurator) -> RuleBuilderOptions[SubjectT, PropertyT]:
        """
        Calls `configurator` with the underlying rule, e.g. to set a display name.
        """
        configurator(self._rule)
        return self
