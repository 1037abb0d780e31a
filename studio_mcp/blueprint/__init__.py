"""Template engine turning a command line into a tool schema and renderer."""

from .blueprint import Blueprint, BlueprintError
from .render import MissingParameterError, ParameterTypeError, RenderError
from .schema import InputSchema, Property, build_schema
from .tokenizer import tokenize
from .tokens import FieldToken, TextToken, Token

__all__ = [
    "Blueprint",
    "BlueprintError",
    "FieldToken",
    "InputSchema",
    "MissingParameterError",
    "ParameterTypeError",
    "Property",
    "RenderError",
    "TextToken",
    "Token",
    "build_schema",
    "tokenize",
]
