"""MCP server exposing the Gong call-intelligence API."""

__version__ = "0.1.0"
