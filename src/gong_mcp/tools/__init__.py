"""FastMCP sub-servers exposing the Gong tools."""
