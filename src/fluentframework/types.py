"""
Contains the types used in the rule composition framework
"""
from typing import TYPE_CHECKING, Any, Callable, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .property_rule import PropertyRule


SubjectT = TypeVar("SubjectT")
PropertyT = TypeVar("PropertyT")
ModelT = TypeVar("ModelT")
Constructor: TypeAlias = Callable[[type], Any]
Configurator: TypeAlias = Callable[["PropertyRule[Any]"], None]
MemberAccessor: TypeAlias = Callable[[Any], Any] | str
