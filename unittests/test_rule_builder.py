from dataclasses import dataclass
from typing import Any, Callable, Optional

import pytest

from fluentframework import (
    AbstractValidator,
    ArgumentNullError,
    ChildValidatorAdaptor,
    NotNullValidator,
    PropertyRule,
    PropertyValidator,
    RuleBuilder,
    RuleBuilderInitial,
    RuleBuilderOptions,
    default_constructor,
)


@dataclass
class Contact:
    name: str
    nickname: str


@dataclass
class Employee:
    name: str
    full_name: str


class LabeledValidator(PropertyValidator[Any]):
    def __init__(self, label: str):
        super().__init__()
        self.label = label

    def is_valid(self, value: Any) -> bool:
        return True

    def __repr__(self):
        return f"LabeledValidator({self.label})"


NAME_UNITS = (LabeledValidator("name-1"), LabeledValidator("name-2"), LabeledValidator("name-3"))
NICKNAME_UNITS = (LabeledValidator("nickname-1"), LabeledValidator("nickname-2"))


class ContactValidator(AbstractValidator[Contact]):
    def __init__(self):
        super().__init__()
        builder = self.rule_for(lambda contact: contact.name)
        for unit in NAME_UNITS:
            builder = builder.set_validator(unit)
        self.rule_for(lambda contact: contact.nickname).set_validator(NICKNAME_UNITS[0]).set_validator(
            NICKNAME_UNITS[1]
        )


class EmptyContactValidator(AbstractValidator[Contact]):
    pass


class CountingConstructor:
    """Records every requested type and delegates to `factory`"""

    def __init__(self, factory: Callable[[type], Any] = default_constructor):
        self.factory = factory
        self.requested_types: list[type] = []

    def __call__(self, requested_type: type) -> Any:
        self.requested_types.append(requested_type)
        return self.factory(requested_type)


def _builder(property_name: str = "name", constructor: Optional[Callable[[type], Any]] = None) -> RuleBuilder:
    if constructor is None:
        return RuleBuilder(PropertyRule(property_name))
    return RuleBuilder(PropertyRule(property_name), constructor)


class TestSetValidator:
    def test_appends_as_last_element(self):
        builder = _builder()
        first, second = LabeledValidator("first"), LabeledValidator("second")
        builder.set_validator(first)
        length_before = len(builder.rule.validators)
        builder.set_validator(second)
        assert len(builder.rule.validators) == length_before + 1
        assert builder.rule.validators[-1] is second

    def test_returns_same_builder(self):
        builder = _builder()
        assert builder.set_validator(LabeledValidator("a")) is builder

    def test_preserves_call_order_and_duplicates(self):
        builder = _builder()
        units = [LabeledValidator(str(index)) for index in range(5)]
        for unit in units:
            builder.set_validator(unit)
        builder.set_validator(units[0])
        assert builder.rule.validators == tuple(units) + (units[0],)

    def test_none_is_rejected_without_mutation(self):
        builder = _builder()
        builder.set_validator(LabeledValidator("a"))
        with pytest.raises(ArgumentNullError, match="Cannot pass a null validator to set_validator"):
            builder.set_validator(None)  # type:ignore[call-overload]
        assert len(builder.rule.validators) == 1

    def test_chain_keeps_attachments_before_failure(self):
        builder = _builder()
        first = LabeledValidator("first")
        with pytest.raises(ArgumentNullError):
            builder.set_validator(first).set_validator(None)  # type:ignore[call-overload]
        assert builder.rule.validators == (first,)

    def test_whole_object_validator_is_wrapped(self):
        builder = _builder()
        contact_validator = ContactValidator()
        builder.set_validator(contact_validator)
        (unit,) = builder.rule.validators
        assert isinstance(unit, ChildValidatorAdaptor)
        assert unit.validator is contact_validator

    @pytest.mark.parametrize(
        "validator_class",
        [
            pytest.param(ContactValidator, id="whole-object validator class"),
            pytest.param(NotNullValidator, id="validator unit class"),
        ],
    )
    def test_validator_class_is_rejected_on_declaration(self, validator_class: type):
        builder = _builder()
        with pytest.raises(TypeError, match="set_validator_type or using"):
            builder.set_validator(validator_class)
        assert builder.rule.validators == ()

    def test_unknown_object_is_rejected(self):
        builder = _builder()
        with pytest.raises(TypeError):
            builder.set_validator("not a validator")  # type:ignore[call-overload]
        assert builder.rule.validators == ()


class TestResolvedValidators:
    def test_set_validator_type_resolves_once_per_call(self):
        constructor = CountingConstructor()
        builder = _builder(constructor=constructor)
        builder.set_validator_type(ContactValidator).set_validator_type(ContactValidator)
        assert constructor.requested_types == [ContactValidator, ContactValidator]
        assert len(builder.rule.validators) == 2
        assert all(isinstance(unit, ChildValidatorAdaptor) for unit in builder.rule.validators)

    def test_set_validator_type_with_null_resolution(self):
        constructor = CountingConstructor(lambda _: None)
        builder = _builder(constructor=constructor)
        with pytest.raises(ArgumentNullError, match="set_validator_type"):
            builder.set_validator_type(ContactValidator)
        assert constructor.requested_types == [ContactValidator]
        assert builder.rule.validators == ()

    def test_using_attaches_resolved_unit_directly(self):
        constructor = CountingConstructor()
        builder = _builder(constructor=constructor)
        builder.using(NotNullValidator)
        assert constructor.requested_types == [NotNullValidator]
        (unit,) = builder.rule.validators
        assert isinstance(unit, NotNullValidator)

    def test_using_with_null_resolution(self):
        builder = _builder(constructor=lambda _: None)
        with pytest.raises(ArgumentNullError, match="using"):
            builder.using(NotNullValidator)
        assert builder.rule.validators == ()

    def test_resolution_of_wrong_type_looks_like_null(self):
        builder = _builder(constructor=lambda _: LabeledValidator("wrong"))
        with pytest.raises(ArgumentNullError, match="set_validator_type"):
            builder.set_validator_type(ContactValidator)
        assert builder.rule.validators == ()

    def test_constructor_errors_propagate_unchanged(self):
        def failing_constructor(requested_type: type) -> Any:
            raise LookupError(f"{requested_type.__name__} is not registered")

        builder = _builder(constructor=failing_constructor)
        with pytest.raises(LookupError, match="NotNullValidator is not registered"):
            builder.using(NotNullValidator)


class TestUsingRuleFrom:
    def test_imports_units_of_same_named_member_in_order(self):
        builder = _builder("name")
        existing = LabeledValidator("existing")
        builder.set_validator(existing).using_rule_from(ContactValidator)
        assert builder.rule.validators == (existing,) + NAME_UNITS

    def test_member_without_units_changes_nothing(self):
        builder = _builder("name")
        existing = LabeledValidator("existing")
        builder.set_validator(existing).using_rule_from(EmptyContactValidator)
        assert builder.rule.validators == (existing,)

    def test_unknown_member_changes_nothing(self):
        builder = _builder("street")
        builder.using_rule_from(ContactValidator)
        assert builder.rule.validators == ()

    def test_accessor_decides_the_member(self):
        builder = _builder("full_name")
        builder.using_rule_from(ContactValidator, lambda contact: contact.nickname)
        assert builder.rule.validators == NICKNAME_UNITS

    def test_accessor_wins_over_own_property_name(self):
        builder = _builder("name")
        builder.using_rule_from(ContactValidator, lambda contact: contact.nickname)
        assert builder.rule.validators == NICKNAME_UNITS

    def test_resolves_through_constructor(self):
        constructor = CountingConstructor()
        builder = _builder("name", constructor)
        builder.using_rule_from(ContactValidator)
        assert constructor.requested_types == [ContactValidator]

    def test_null_resolution(self):
        builder = _builder("name", lambda _: None)
        with pytest.raises(ArgumentNullError, match="using_rule_from"):
            builder.using_rule_from(ContactValidator)
        assert builder.rule.validators == ()

    def test_inside_a_validator(self):
        class EmployeeValidator(AbstractValidator[Employee]):
            def __init__(self):
                super().__init__()
                self.rule_for(lambda employee: employee.name).using_rule_from(ContactValidator)
                self.rule_for(lambda employee: employee.full_name).using_rule_from(
                    ContactValidator, lambda contact: contact.nickname
                )

        descriptor = EmployeeValidator().create_descriptor()
        assert tuple(descriptor.get_validators_for_member("name")) == NAME_UNITS
        assert tuple(descriptor.get_validators_for_member("full_name")) == NICKNAME_UNITS


class TestConfigure:
    def test_receives_the_underlying_rule_once(self):
        builder = _builder()
        received: list[PropertyRule] = []
        builder.set_validator(LabeledValidator("a")).configure(received.append)
        assert len(received) == 1
        assert received[0] is builder.rule

    def test_mutation_is_visible(self):
        builder = _builder()

        def set_display_name(rule: PropertyRule) -> None:
            rule.display_name = "Given name"

        result = builder.set_validator(LabeledValidator("a")).configure(set_display_name)
        assert result is builder
        assert builder.rule.get_display_name() == "Given name"
        assert builder.rule.property_name == "name"

    def test_only_offered_by_the_options_view(self):
        assert not hasattr(RuleBuilderInitial, "configure")
        assert hasattr(RuleBuilderOptions, "configure")
        for operation in ("set_validator", "set_validator_type", "using", "using_rule_from"):
            assert hasattr(RuleBuilderInitial, operation)
            assert hasattr(RuleBuilderOptions, operation)
