"""
This package enables you to declare validation rules for the properties of your models in a fluent way. Validators
are resolved through an exchangeable constructor function, so it works with any dependency injection mechanism.
"""

from .analysis import ValidationResult
from .builder import RuleBuilder, RuleBuilderInitial, RuleBuilderOptions
from .child_adapter import ChildValidatorAdaptor, infer_property_validator_for_child_validator
from .constructor import ConstructorRegistry, default_constructor, resolve
from .descriptor import ValidatorDescriptor
from .errors import ArgumentNullError, ValidationFailure, guard
from .property_rule import PropertyRule
from .property_validator import PropertyValidator, PropertyValidatorContext
from .protocols import ValidatorProtocol
from .validator import AbstractValidator
from .validators import (
    InclusiveBetweenValidator,
    LengthValidator,
    NotEmptyValidator,
    NotNullValidator,
    PredicateValidator,
)
