"""
Contains the read-only view on the rules of a fully built validator.
"""
from typing import Any, Iterable, Optional

from frozendict import frozendict

from .property_rule import PropertyRule
from .property_validator import PropertyValidator


class ValidatorDescriptor:
    """
    Answers which validator units a validator has registered for a member. It never hands out the rules themselves.
    """

    def __init__(self, rules: Iterable[PropertyRule[Any]]):
        self._rules: tuple[PropertyRule[Any], ...] = tuple(rules)

    def get_validators_for_member(self, name: str) -> list[PropertyValidator[Any]]:
        """
        Returns the validator units of all rules for the member `name` (rule order, then unit order).
        Unknown members result in an empty list.
        """
        return [validator for rule in self._rules if rule.property_name == name for validator in rule.validators]

    def get_members_with_validators(self) -> frozendict[str, tuple[PropertyValidator[Any], ...]]:
        """Maps every member with at least one rule onto its validator units"""
        members: dict[str, tuple[PropertyValidator[Any], ...]] = {}
        for rule in self._rules:
            members[rule.property_name] = members.get(rule.property_name, ()) + rule.validators
        return frozendict(members)

    def get_name(self, property_name: str) -> Optional[str]:
        """Returns the display name of the first rule for `property_name` or None if there is no such rule"""
        for rule in self._rules:
            if rule.property_name == property_name:
                return rule.get_display_name()
        return None
