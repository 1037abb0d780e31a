"""Input schema inference from tokenized shell words."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..constants import DEFAULT_ARRAY_DESCRIPTION
from .tokens import FieldToken, Token, normalize_name

STRING = "string"
ARRAY = "array"
BOOLEAN = "boolean"


@dataclass(frozen=True)
class Property:
    """A single entry in the tool input schema."""

    name: str
    type: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.description:
            data["description"] = self.description
        if self.type == ARRAY:
            data["items"] = {"type": STRING}
        return data


@dataclass(frozen=True)
class InputSchema:
    """JSON-Schema-like object describing the accepted tool arguments."""

    properties: Mapping[str, Property] = field(default_factory=dict)
    required: Tuple[str, ...] = ()

    def get(self, name: str) -> Optional[Property]:
        return self.properties.get(normalize_name(name))

    def to_dict(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema


def build_schema(shell_words: Iterable[Sequence[Token]]) -> InputSchema:
    """Walk every field token once and merge them into a single schema.

    Arrays are always required, flags never are, and scalars follow the
    delimiter they were written with. A name seen more than once keeps its
    first type, picks up the first non-empty description, and is required if
    any occurrence is, unless that first type is boolean.
    """
    properties: Dict[str, Property] = {}
    required: List[str] = []

    for tokens in shell_words:
        for token in tokens:
            if not isinstance(token, FieldToken):
                continue
            name = token.normalized_name
            candidate = _property_for(token)

            existing = properties.get(name)
            if existing is None:
                properties[name] = candidate
            elif candidate.description and not existing.description:
                properties[name] = replace(existing, description=candidate.description)

            if _is_required(token) and name not in required:
                required.append(name)

    for name, prop in list(properties.items()):
        if prop.type == ARRAY and not prop.description:
            properties[name] = replace(prop, description=DEFAULT_ARRAY_DESCRIPTION)

    # A name that merged to a flag stays optional even if a later occurrence was required.
    required = [name for name in required if properties[name].type != BOOLEAN]

    return InputSchema(properties=MappingProxyType(properties), required=tuple(required))


def _property_for(token: FieldToken) -> Property:
    name = token.normalized_name
    if token.is_flag:
        return Property(name=name, type=BOOLEAN, description=token.description)
    if token.is_array:
        return Property(name=name, type=ARRAY, description=token.description)
    return Property(name=name, type=STRING, description=token.description)


def _is_required(token: FieldToken) -> bool:
    if token.is_flag:
        return False
    return token.is_array or token.required


__all__ = ["ARRAY", "BOOLEAN", "STRING", "InputSchema", "Property", "build_schema"]
