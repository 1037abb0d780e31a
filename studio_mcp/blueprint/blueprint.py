"""Blueprint: a templated command line parsed once at startup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .render import render, validate
from .schema import InputSchema, build_schema
from .tokenizer import tokenize
from .tokens import Token

_TOOL_NAME_INVALID = re.compile(r"[^A-Za-z0-9_]")


class BlueprintError(ValueError):
    """Raised when a blueprint cannot be built from the supplied argv."""


@dataclass(frozen=True)
class Blueprint:
    """Parsed command template bundling tokens, schema, and rendering.

    ``base_command`` is argv[0] and is never templated; every later argument
    is tokenized on its own into ``shell_words``.
    """

    base_command: str
    shell_words: Tuple[Tuple[Token, ...], ...]
    input_schema: InputSchema

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> "Blueprint":
        if not argv:
            raise BlueprintError("cannot create blueprint: no command provided")
        base_command = argv[0]
        if not base_command.strip():
            raise BlueprintError("cannot create blueprint: empty command provided")

        shell_words = tuple(tuple(tokenize(word)) for word in argv[1:])
        return cls(
            base_command=base_command,
            shell_words=shell_words,
            input_schema=build_schema(shell_words),
        )

    @property
    def tool_name(self) -> str:
        return _TOOL_NAME_INVALID.sub("_", self.base_command)

    @property
    def tool_description(self) -> str:
        return f"Run the shell command `{self.command_format()}`"

    def command_format(self) -> str:
        """Return the human-facing form of the command, e.g. ``echo {{text}}``."""
        parts = [self.base_command]
        for tokens in self.shell_words:
            parts.append("".join(token.display() for token in tokens))
        return " ".join(_quote_display(part) for part in parts)

    def schema(self) -> Dict[str, Any]:
        return self.input_schema.to_dict()

    def render(self, values: Optional[Mapping[str, Any]] = None) -> List[str]:
        """Validate ``values`` and return the argv to execute.

        Raises :class:`~studio_mcp.blueprint.render.RenderError` subclasses for
        missing required parameters or non-array values for array parameters.
        """
        supplied: Mapping[str, Any] = values or {}
        validate(self.input_schema, supplied)
        return render(self.base_command, self.shell_words, supplied)


def _quote_display(part: str) -> str:
    if not part or " " in part:
        return f'"{part}"'
    return part


__all__ = ["Blueprint", "BlueprintError"]
