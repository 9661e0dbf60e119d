"""
Contains functions to translate member accessors like `lambda person: person.address.city` into stable member names
and to query objects by those names.
"""
from typing import Any

from fluentframework.types import MemberAccessor


class _MemberRecorder:
    """
    Stand-in for the subject model. Every attribute access returns a new recorder which remembers the path.
    """

    __slots__ = ("_path",)

    def __init__(self, path: tuple[str, ...] = ()):
        object.__setattr__(self, "_path", path)

    def __getattr__(self, name: str) -> "_MemberRecorder":
        if name.startswith("__"):
            raise AttributeError(name)
        return _MemberRecorder(self._path + (name,))

    def __setattr__(self, name: str, value: Any):
        raise AttributeError("Member accessors must not assign attributes")


def get_member_path(accessor: MemberAccessor) -> str:
    """
    Returns the dotted attribute path the `accessor` traverses, e.g. `"address.city"` for
    `lambda person: person.address.city`. Strings are taken as the path itself.
    A ValueError is raised if the accessor is no plain member access.
    """
    if isinstance(accessor, str):
        if not accessor:
            raise ValueError("The member path must not be empty")
        return accessor
    if not callable(accessor):
        raise ValueError(f"{accessor!r} is neither a member path nor a member accessor")
    result = accessor(_MemberRecorder())
    if not isinstance(result, _MemberRecorder):
        raise ValueError(f"{accessor!r} is not a member access expression")
    # pylint: disable=protected-access
    if len(result._path) == 0:
        raise ValueError(f"{accessor!r} does not access any member")
    return ".".join(result._path)


def get_member_name(accessor: MemberAccessor) -> str:
    """Returns the name of the member the accessor ends at (the last segment of the member path)"""
    return get_member_path(accessor).rsplit(".", 1)[-1]


def required_field(obj: Any, member_path: str) -> Any:
    """
    Reads the value at the dotted `member_path` of `obj`. An AttributeError naming the path up to the missing member
    is raised if a member does not exist.
    """
    value: Any = obj
    visited: list[str] = []
    for member in member_path.split("."):
        visited.append(member)
        try:
            value = getattr(value, member)
        except AttributeError as error:
            raise AttributeError(f"{'.'.join(visited)}: Not found") from error
    return value
