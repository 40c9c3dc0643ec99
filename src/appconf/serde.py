"""Conversion between config values and plain encodable data.

``to_plain`` flattens dataclasses before encoding. ``populate`` fills a
caller-supplied destination in place with decoded data, the way a decoder
writes into a value passed by reference:

- ``None`` destinations receive the decoded value as-is (returned).
- ``None`` data (a stored null) leaves the destination untouched.
- mappings are updated key by key; existing keys not in the data survive.
- lists have their contents replaced.
- dataclass instances get matching fields assigned; unknown keys are ignored.
  Field annotations drive reconstruction, so ``Server``, ``Server | None``,
  ``list[Server]`` and ``dict[str, Server]`` fields come back as dataclasses
  rather than plain dicts. Frozen dataclasses cannot be filled.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any, Union, get_args, get_origin, get_type_hints


def to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _is_frozen(instance: Any) -> bool:
    return bool(type(instance).__dataclass_params__.frozen)


def _field_types(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except NameError:
        # Forward references that cannot be resolved keep only the concrete annotations.
        return {field.name: field.type for field in dataclasses.fields(cls) if not isinstance(field.type, str)}


def build_value(hint: Any, value: Any) -> Any:
    """Rebuild ``value`` as the annotated type ``hint`` where that type is a dataclass."""
    if value is None:
        return None

    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        candidates = [arg for arg in get_args(hint) if arg is not type(None)]
        return build_value(candidates[0], value) if len(candidates) == 1 else value

    if origin in (list, MutableSequence) and isinstance(value, list):
        args = get_args(hint)
        return [build_value(args[0], item) for item in value] if args else value

    if origin in (dict, Mapping, MutableMapping) and isinstance(value, Mapping):
        args = get_args(hint)
        return {key: build_value(args[1], item) for key, item in value.items()} if len(args) == 2 else dict(value)

    if isinstance(hint, type) and dataclasses.is_dataclass(hint) and isinstance(value, Mapping):
        hints = _field_types(hint)
        kwargs = {
            field.name: build_value(hints.get(field.name, Any), value[field.name])
            for field in dataclasses.fields(hint)
            if field.init and field.name in value
        }
        return hint(**kwargs)

    return value


def populate(target: Any, data: Any) -> Any:
    if target is None:
        return data
    if data is None:
        return target

    if isinstance(target, MutableMapping):
        if not isinstance(data, Mapping):
            raise TypeError(f"cannot decode {type(data).__name__} into {type(target).__name__}")
        target.update(data)
        return target

    if isinstance(target, MutableSequence):
        if not isinstance(data, list):
            raise TypeError(f"cannot decode {type(data).__name__} into {type(target).__name__}")
        target[:] = data
        return target

    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        if _is_frozen(target):
            raise TypeError(f"cannot decode into frozen dataclass {type(target).__name__}")
        if not isinstance(data, Mapping):
            raise TypeError(f"cannot decode {type(data).__name__} into {type(target).__name__}")
        hints = _field_types(type(target))
        field_names = {field.name for field in dataclasses.fields(target)}
        for key, value in data.items():
            if key not in field_names:
                continue
            current = getattr(target, key)
            if (
                dataclasses.is_dataclass(current)
                and not isinstance(current, type)
                and not _is_frozen(current)
                and isinstance(value, Mapping)
            ):
                populate(current, value)
            else:
                setattr(target, key, build_value(hints.get(key, Any), value))
        return target

    raise TypeError(f"cannot decode into immutable {type(target).__name__}; pass a mapping, list or dataclass")
