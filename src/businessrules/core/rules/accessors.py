"""Resolution of accessors used to reach into an entity."""

from collections.abc import Mapping
from typing import Any, Callable, Union

from ..exceptions import InvalidAccessorError

Accessor = Union[Callable[[Any], Any], str]


def read_field(entity: Any, name: str) -> Any:
    """
    Read a named field from an entity.

    Mappings are read by key, other objects by attribute. A missing field reads
    as None.
    """
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)


def make_getter(accessor: Accessor, owner: str) -> Callable[[Any], Any]:
    """
    Turn an accessor into a function of the entity.

    Args:
        accessor: Callable taking the entity, or the name of a field
        owner: Name of the rule being built, used in the error message

    Returns:
        Callable[[Any], Any]: Function extracting the value from an entity

    Raises:
        InvalidAccessorError: If accessor is neither callable nor a string
    """
    if callable(accessor):
        return accessor
    if isinstance(accessor, str):
        return lambda entity: read_field(entity, accessor)

    raise InvalidAccessorError(
        f"{owner} creation failed: accessor is not a function nor a string: {accessor!r}"
    )
