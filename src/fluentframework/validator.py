"""
Contains the base class for validators of whole objects. Subclasses declare their rules in `__init__`:
```
class PersonValidator(AbstractValidator[Person]):
    def __init__(self, constructor: Constructor = default_constructor):
        super().__init__(constructor)
        self.rule_for(lambda person: person.age).set_validator(NotNullValidator()).using(AgeRangeValidator)
```
"""
import logging
from typing import Callable, Generic

from .analysis import ValidationResult
from .builder import RuleBuilder, RuleBuilderInitial
from .constructor import default_constructor
from .descriptor import ValidatorDescriptor
from .errors import ValidationFailure
from .property_rule import PropertyRule
from .types import Constructor, PropertyT, SubjectT

_logger = logging.getLogger(__name__)


class AbstractValidator(Generic[SubjectT]):
    """
    Owns the property rules of the subject type `SubjectT`. Every rule is created by `rule_for` which hands out the
    builder to fill it.
    """

    def __init__(self, constructor: Constructor = default_constructor):
        self._constructor = constructor
        self._rules: list[PropertyRule[SubjectT]] = []

    def rule_for(self, accessor: Callable[[SubjectT], PropertyT] | str) -> RuleBuilderInitial[SubjectT, PropertyT]:
        """
        Starts a new rule for the member the `accessor` points to, e.g. `lambda person: person.age`.
        """
        rule: PropertyRule[SubjectT] = PropertyRule.create(accessor)
        self._rules.append(rule)
        return RuleBuilder(rule, self._constructor)

    @property
    def rules(self) -> tuple[PropertyRule[SubjectT], ...]:
        """The rules in declaration order"""
        return tuple(self._rules)

    def create_descriptor(self) -> ValidatorDescriptor:
        """Returns a read-only view on the registered rules"""
        return ValidatorDescriptor(self._rules)

    def validate(self, instance: SubjectT) -> ValidationResult:
        """
        Runs all rules against `instance`.
        """
        failures: list[ValidationFailure] = []
        for rule in self._rules:
            failures.extend(rule.validate(instance))
        _logger.debug("%s found %i failure(s)", type(self).__name__, len(failures))
        return ValidationResult(failures)

    def __str__(self):
        return f"{type(self).__name__}({', '.join(str(rule) for rule in self._rules)})"

