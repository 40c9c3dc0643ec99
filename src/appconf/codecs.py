"""Encode/decode function pairs for common text formats.

Each pair is bundled in a :class:`Codec` together with the filename a
context defaults to when the codec is selected on a builder. JSON is the
builder's built-in convenience; TOML and YAML are available for callers that
opt into them explicitly via ``Builder.codec``.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import tomli_w
import yaml

from .constants import JSON_FILENAME, JSON_INDENT, TOML_FILENAME, YAML_FILENAME
from .serde import populate, to_plain

Marshal = Callable[[Any], bytes]
Unmarshal = Callable[[bytes, Any], Any]


@dataclass(frozen=True, slots=True)
class Codec:
    name: str
    filename: str
    encode: Marshal
    decode: Unmarshal


def json_marshal(value: Any) -> bytes:
    return json.dumps(to_plain(value), indent=JSON_INDENT).encode("utf-8")


def json_unmarshal(data: bytes, target: Any = None) -> Any:
    return populate(target, json.loads(data))


def toml_marshal(value: Any) -> bytes:
    return tomli_w.dumps(to_plain(value)).encode("utf-8")


def toml_unmarshal(data: bytes, target: Any = None) -> Any:
    return populate(target, tomllib.loads(data.decode("utf-8")))


def yaml_marshal(value: Any) -> bytes:
    return yaml.safe_dump(to_plain(value), sort_keys=False).encode("utf-8")


def yaml_unmarshal(data: bytes, target: Any = None) -> Any:
    return populate(target, yaml.safe_load(data))


JSON = Codec("json", JSON_FILENAME, json_marshal, json_unmarshal)
TOML = Codec("toml", TOML_FILENAME, toml_marshal, toml_unmarshal)
YAML = Codec("yaml", YAML_FILENAME, yaml_marshal, yaml_unmarshal)

CODECS: dict[str, Codec] = {codec.name: codec for codec in (JSON, TOML, YAML)}


def get_codec(name: str) -> Codec:
    try:
        return CODECS[name.strip().lower()]
    except KeyError as error:
        raise ValueError(f"Unknown format {name!r}. Expected one of: {', '.join(CODECS)}.") from error
