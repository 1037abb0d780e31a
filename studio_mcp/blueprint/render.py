"""Render tokenized shell words into a concrete argument vector."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from .schema import ARRAY, InputSchema
from .tokens import FieldToken, TextToken, Token, denormalize_name, normalize_name

_MISSING = object()

_JSON_TYPE_NAMES = (
    (bool, "boolean"),
    (str, "string"),
    (int, "number"),
    (float, "number"),
    (Mapping, "object"),
    ((list, tuple), "array"),
)


class RenderError(ValueError):
    """Raised when supplied values cannot be rendered into a command."""


class MissingParameterError(RenderError):
    """A required parameter was not supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing required parameter: {name}")
        self.name = name


class ParameterTypeError(RenderError):
    """A supplied value does not match the schema type of its parameter."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(f"parameter '{name}' must be an {expected}, got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


def lookup_value(values: Mapping[str, Any], name: str) -> Any:
    """Find ``name`` in ``values`` accepting either dash or underscore spelling.

    Returns the module sentinel ``_MISSING`` when no spelling is present.
    """
    for key in _candidate_keys(name):
        if key in values:
            return values[key]
    return _MISSING


def is_missing(value: Any) -> bool:
    return value is _MISSING


def validate(schema: InputSchema, values: Mapping[str, Any]) -> None:
    """Check required presence and array typing before rendering."""
    for name in schema.required:
        value = lookup_value(values, name)
        if is_missing(value) or value is None:
            raise MissingParameterError(name)

    for key, value in values.items():
        prop = schema.get(key)
        if prop is None or prop.type != ARRAY:
            continue
        if not isinstance(value, (list, tuple)):
            raise ParameterTypeError(key, ARRAY, json_type_name(value))


def render(
    base_command: str,
    shell_words: Sequence[Sequence[Token]],
    values: Mapping[str, Any],
) -> List[str]:
    """Produce the argv for ``base_command`` with every shell word rendered."""
    argv = [base_command]
    for tokens in shell_words:
        argv.extend(render_word(tokens, values))
    return argv


def render_word(tokens: Sequence[Token], values: Mapping[str, Any]) -> List[str]:
    """Render a single shell word into zero or more argv entries."""
    if _should_skip(tokens, values):
        return []

    if len(tokens) == 1 and isinstance(tokens[0], FieldToken):
        field = tokens[0]
        value = lookup_value(values, field.name)
        if field.is_flag:
            return [field.original_flag] if value is True else []
        if field.is_array:
            if is_missing(value) or not value:
                return []
            if isinstance(value, (list, tuple)):
                return [to_text(item) for item in value]
            return [to_text(value)]
        if not field.required or is_missing(value):
            return [to_text(value)] if _is_meaningful(value) else []

    return ["".join(_render_token(token, values) for token in tokens)]


def to_text(value: Any) -> str:
    """Coerce a supplied value into its argv string form."""
    if is_missing(value) or value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(to_text(item) for item in value)
    return str(value)


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    for kinds, name in _JSON_TYPE_NAMES:
        if isinstance(value, kinds):
            return name
    return type(value).__name__


def _render_token(token: Token, values: Mapping[str, Any]) -> str:
    if isinstance(token, TextToken):
        return token.value
    value = lookup_value(values, token.name)
    if token.is_flag:
        return token.original_flag if value is True else ""
    return to_text(value)


def _should_skip(tokens: Sequence[Token], values: Mapping[str, Any]) -> bool:
    # Only words made purely of optional fields (arrays count) can vanish.
    for token in tokens:
        if isinstance(token, TextToken):
            return False
        if token.required and not token.is_array:
            return False
        if _is_meaningful(lookup_value(values, token.name)):
            return False
    return True


def _is_meaningful(value: Any) -> bool:
    if is_missing(value) or value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, list, tuple)):
        return len(value) > 0
    return True


def _candidate_keys(name: str) -> Tuple[str, ...]:
    keys: List[str] = []
    for key in (name, normalize_name(name), denormalize_name(name)):
        if key not in keys:
            keys.append(key)
    return tuple(keys)


__all__ = [
    "MissingParameterError",
    "ParameterTypeError",
    "RenderError",
    "is_missing",
    "json_type_name",
    "lookup_value",
    "render",
    "render_word",
    "to_text",
    "validate",
]
