"""Bridge from FastMCP tool functions to the dispatch boundary."""

from __future__ import annotations

from fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations

from ..dispatch import call_tool

READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True,
)


async def run_tool(name: str, **arguments: object) -> str:
    """Dispatch *name* with the supplied (non-None) arguments.

    Error results are re-raised as FastMCP ``ToolError`` so the host receives
    the message as text with ``isError`` set.
    """
    result = await call_tool(
        name, {key: value for key, value in arguments.items() if value is not None}
    )
    if result.is_error:
        raise ToolError(result.text)
    return result.text
