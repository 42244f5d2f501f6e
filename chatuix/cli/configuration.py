"""CLI theme configuration.

A theme maps the roles the runner prints (``assistant``, ``error``, ...) to
rich style strings. A YAML file may override any of them under a top-level
``theme`` mapping; entries that don't name a known role or don't parse as a
rich style are skipped with a warning, and every role missing from the file
keeps its default.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger
from rich.errors import StyleSyntaxError
from rich.style import Style

DEFAULT_THEME = {
    "intro": "bold blue",
    "outtro": "bold blue",
    "info": "bold bright_black",
    "user-prompt": "bold cyan",
    "assistant": "bold green",
    "component": "magenta",
    "action": "cyan",
    "error": "bold red",
}


def _read_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        logger.warning(f"Theme file {path} is not a mapping; using defaults.")
        return {}
    overrides = config.get("theme") or {}
    if not isinstance(overrides, dict):
        logger.warning(f"`theme` in {path} is not a mapping; using defaults.")
        return {}
    return overrides


def validate_theme(overrides: Dict[str, Any]) -> Dict[str, str]:
    """Keep only overrides for known roles whose value is a valid rich style."""
    valid: Dict[str, str] = {}
    for role, style in overrides.items():
        if role not in DEFAULT_THEME:
            logger.warning(f"Ignoring unknown theme role '{role}'.")
            continue
        if not isinstance(style, str):
            logger.warning(f"Theme role '{role}' needs a style string, got {style!r}.")
            continue
        try:
            Style.parse(style)
        except StyleSyntaxError as e:
            logger.warning(f"Theme role '{role}' has an invalid style: {e}")
            continue
        valid[role] = style
    return valid


def load_theme(config_path: Optional[str] = None) -> Dict[str, str]:
    """Load the CLI theme, merging a YAML file's overrides over the defaults."""
    if config_path is None:
        return DEFAULT_THEME.copy()
    p = Path(config_path)
    if not p.exists():
        logger.warning(f"Theme file not found at {p}; using defaults.")
        return DEFAULT_THEME.copy()
    try:
        overrides = _read_overrides(p)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load theme from {p}: {e}")
        return DEFAULT_THEME.copy()
    return {**DEFAULT_THEME, **validate_theme(overrides)}
