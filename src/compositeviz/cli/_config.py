"""Project-level configuration from pyproject.toml.

Reads the [tool.compositeviz] section to provide named snapshot shortcuts
and default canvas settings for the CLI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 400


@dataclass(frozen=True)
class VizConfig:
    """Configuration from [tool.compositeviz] in pyproject.toml."""

    snapshots: dict[str, str] = field(default_factory=dict)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: int | None = None


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> VizConfig:
    """Load [tool.compositeviz] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.compositeviz] section.
    """
    path = find_pyproject(start)
    if path is None:
        return VizConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            logger.warning("tomli is not installed; ignoring %s", path)
            return VizConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("compositeviz", {})
    if not section:
        return VizConfig()

    logger.debug("Loaded [tool.compositeviz] from %s", path)
    return VizConfig(
        snapshots=section.get("snapshots", {}),
        width=int(section.get("width", DEFAULT_WIDTH)),
        height=int(section.get("height", DEFAULT_HEIGHT)),
        seed=section.get("seed"),
    )
