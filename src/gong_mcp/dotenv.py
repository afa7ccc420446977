"""Fill missing Gong credentials from ``~/.config/gong-mcp/.env``."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_ENV_PATH = Path.home() / ".config" / "gong-mcp" / ".env"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def _is_unset_or_placeholder(key: str, value: str | None) -> bool:
    """Blank values and unexpanded ``${GONG_ACCESS_KEY}`` placeholders count as unset."""
    if value is None:
        return True
    normalized = _strip_quotes(value.strip()).strip()
    if not normalized:
        return True
    if normalized in {f"${key}", f"${{{key}}}"}:
        return True
    return normalized.startswith(f"${{{key}:-") and normalized.endswith("}")


def parse_dotenv(path: Path) -> dict[str, str]:
    result: dict[str, str] = {}
    if not path.is_file():
        return result

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            result[key] = _strip_quotes(value.strip())
    return result


def load_dotenv(path: Path | None = None) -> dict[str, str]:
    """Set unset variables from *path*; returns the ones injected."""
    parsed = parse_dotenv(path or DEFAULT_ENV_PATH)
    injected: dict[str, str] = {}
    for key, value in parsed.items():
        if _is_unset_or_placeholder(key, os.environ.get(key)):
            os.environ[key] = value
            injected[key] = value
    return injected
