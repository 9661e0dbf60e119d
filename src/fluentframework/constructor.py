"""
Contains the constructor indirection. The framework never instantiates validators itself but always asks a
`Constructor`, i.e. a function mapping a requested type onto an instance. Plug in whatever resolution mechanism
(dependency injection container, ...) you like.
"""
import logging
from typing import Any, Callable, Optional, TypeVar

from typeguard import TypeCheckError, check_type

from .errors import ArgumentNullError
from .types import Constructor

_logger = logging.getLogger(__name__)

InstanceT = TypeVar("InstanceT")


def default_constructor(requested_type: type[InstanceT]) -> InstanceT:
    """Instantiates the requested type without arguments"""
    return requested_type()


class ConstructorRegistry:
    """
    A minimal container which can be used as `Constructor`. Types without registration are handed to the `fallback`.
    """

    def __init__(self, fallback: Optional[Constructor] = default_constructor):
        self._factories: dict[type, Callable[[], Any]] = {}
        self._fallback = fallback

    def register(self, requested_type: type, factory: Callable[[], Any]) -> "ConstructorRegistry":
        """Resolves `requested_type` by calling `factory` on every request"""
        self._factories[requested_type] = factory
        return self

    def register_instance(self, requested_type: type, instance: Any) -> "ConstructorRegistry":
        """Resolves `requested_type` to always the same `instance`"""
        self._factories[requested_type] = lambda: instance
        return self

    def __contains__(self, requested_type: type) -> bool:
        return requested_type in self._factories

    def __call__(self, requested_type: type) -> Any:
        factory = self._factories.get(requested_type)
        if factory is not None:
            return factory()
        if self._fallback is None:
            return None
        return self._fallback(requested_type)


def resolve(
    constructor: Constructor, requested_type: type[InstanceT], operation: str, capability: Optional[type] = None
) -> InstanceT:
    """
    Asks the `constructor` exactly once for an instance of `requested_type`. If it returns None, something which is
    no `requested_type` or something lacking the `capability` the operation needs, an ArgumentNullError naming the
    `operation` is raised. Errors raised by the constructor itself are propagated unchanged.
    """
    instance = constructor(requested_type)
    message = f"Cannot pass a null validator to {operation}: the constructor did not resolve {requested_type.__name__}."
    if instance is None:
        raise ArgumentNullError(message)
    try:
        check_type(instance, requested_type)
    except TypeCheckError as error:
        raise ArgumentNullError(message) from error
    if capability is not None and not isinstance(instance, capability):
        raise ArgumentNullError(message)
    _logger.debug("Resolved %s for %s", requested_type.__name__, operation)
    return instance
