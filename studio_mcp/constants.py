"""Shared constants for the studio-mcp server."""

SERVER_NAME = "studio-mcp"
VERSION = "0.3.0"

CONFIG_FILENAME = ".studio-mcp.yml"
ENV_CONFIG = "STUDIO_MCP_CONFIG"
ENV_DEBUG = "STUDIO_MCP_DEBUG"
ENV_TIMEOUT = "STUDIO_MCP_TIMEOUT"

DEFAULT_ARRAY_DESCRIPTION = "Additional command line arguments"

USAGE = (
    'studio-mcp [--debug] <command> --example "{{req # required arg}}" '
    '"[args... # array of args]"'
)

TEMPLATE_HELP = """\
The command starts at the first non-flag argument. Every later argument is a
shell word that may contain templates:

  "{{req # required arg}}"     a required string named 'req'
  "[opt # optional string]"    an optional string named 'opt'
  "[args... # array of args]"  an array of strings expanded into separate words
  "[-f]" / "[--force]"         a boolean flag passed through when true
  "https://en.wikipedia.org/wiki/{{page}}"  a partially templated word

Example:
  studio-mcp say -v siri "{{speech # a concise phrase to say outloud to the user}}"
"""
