"""Token types produced by the blueprint tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def normalize_name(name: str) -> str:
    """Return the schema spelling of a field name (dashes become underscores)."""
    return name.replace("-", "_")


def denormalize_name(name: str) -> str:
    return name.replace("_", "-")


@dataclass(frozen=True)
class TextToken:
    """Literal characters emitted verbatim."""

    value: str

    def display(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldToken:
    """A placeholder parsed from ``{{...}}`` or ``[...]`` syntax."""

    name: str
    description: str = ""
    required: bool = False
    is_array: bool = False
    original_flag: str = ""

    @property
    def is_flag(self) -> bool:
        return bool(self.original_flag)

    @property
    def normalized_name(self) -> str:
        return normalize_name(self.name)

    def display(self) -> str:
        """Template form shown to humans, descriptions stripped."""
        if self.is_flag:
            return f"[{self.original_flag}]"
        if self.is_array:
            return f"[{self.normalized_name}...]"
        if self.required:
            return "{{" + self.normalized_name + "}}"
        return f"[{self.normalized_name}]"


Token = Union[TextToken, FieldToken]


__all__ = ["FieldToken", "TextToken", "Token", "denormalize_name", "normalize_name"]
