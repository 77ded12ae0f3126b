"""JSON serialization helpers built on structural copies."""

import copy
import json
from typing import Any

import logfire
from pydantic import BaseModel

from selectorkit.exceptions import SerializationError


def _to_structure(value: Any) -> Any:
    """Convert a non-JSON value into plain data for json.dumps.

    Raises:
        TypeError: If the value exposes no structure to serialize.

    """
    if isinstance(value, BaseModel):
        return value.model_dump()
    if hasattr(value, '__dict__'):
        # Callables assigned on the instance are behaviour, not data
        return {key: item for key, item in vars(value).items() if not callable(item)}
    raise TypeError(f'Object of type {type(value).__name__} is not serializable')


def serialize(value: Any) -> str:
    """Return the compact JSON representation of ``value``.

    Args:
        value: Plain data, a pydantic model, or any object with instance attributes

    Returns:
        JSON text without whitespace between tokens.

    Raises:
        SerializationError: If the value cannot be represented as JSON.

    """
    try:
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=_to_structure)
    except (TypeError, ValueError) as e:
        raise SerializationError(f'Could not serialize {type(value).__name__}: {e}') from e


def _copy_onto(blueprint: Any, data: dict[str, Any]) -> Any:
    """Create a new value shaped like ``blueprint`` with ``data`` merged on top."""
    if isinstance(blueprint, type):
        if issubclass(blueprint, BaseModel):
            known = {key: value for key, value in data.items() if key in blueprint.model_fields}
            model = blueprint.model_construct(**known)
            # Undeclared keys land on the instance like model_copy(update=...) does
            for key, value in data.items():
                if key not in known:
                    object.__setattr__(model, key, value)
            return model
        instance = blueprint.__new__(blueprint)
    elif isinstance(blueprint, BaseModel):
        return blueprint.model_copy(update=data)
    else:
        instance = copy.copy(blueprint)

    if isinstance(instance, dict):
        instance.update(data)
    else:
        vars(instance).update(data)
    return instance


def deserialize(blueprint: Any, text: str) -> Any:
    """Parse JSON ``text`` into a new value exposing ``blueprint``'s behaviour.

    The blueprint's constructor is not called. Parsed fields are copied onto
    the new value and win over anything the blueprint already carries.

    Args:
        blueprint: Class (or existing instance) to take methods and defaults from
        text: JSON object text

    Returns:
        New instance of the blueprint's type holding the parsed fields.

    Raises:
        SerializationError: If the text is not a JSON object or the blueprint
            cannot hold attributes.

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f'Invalid JSON: {e}') from e

    if not isinstance(data, dict):
        raise SerializationError(f'Expected a JSON object, got {type(data).__name__}')

    try:
        instance = _copy_onto(blueprint, data)
    except TypeError as e:
        raise SerializationError(f'Cannot copy fields onto {blueprint!r}: {e}') from e

    logfire.debug('Deserialized value', type=type(instance).__name__, fields=list(data))
    return instance


# getJSON / fromJSON style names
get_json = serialize
from_json = deserialize
