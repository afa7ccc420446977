"""Main FastMCP server; mounts all sub-servers."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from . import tracing
from .client import close_client
from .config import get_config
from .tools.calls import calls_server
from .tools.users import users_server
from .tools.workspace import workspace_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    """Startup/shutdown hook: configures tracing and closes the Gong client."""
    tracing.setup()
    yield {}
    closed = await close_client()
    logger.info("Lifespan shutdown: closed %d client(s)", int(closed))
    tracing.shutdown()


app = FastMCP(
    "gong",
    instructions=(
        "Read-only access to Gong call recordings, AI call summaries, transcripts, "
        "users, keyword trackers, workspaces, and the public call library. Prefer "
        "get_call_summary over get_call_transcript; page long transcripts with offset."
    ),
    lifespan=_lifespan,
)

app.mount(calls_server)
app.mount(users_server)
app.mount(workspace_server)


def main() -> None:
    """Entry-point for ``gong-mcp`` console script."""
    if not get_config().has_credentials:
        logger.error(
            "Missing Gong credentials: set GONG_ACCESS_KEY and GONG_ACCESS_KEY_SECRET"
        )
        sys.exit(1)
    app.run()


if __name__ == "__main__":
    main()
