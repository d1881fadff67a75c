"""Locate and parse the bot's TOML config file."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PUGLIA_BOT_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.toml")


def resolve_config_path(path: str | Path | None = None) -> tuple[Path, bool]:
    """
    Pick the config file to read.

    An explicit ``path`` wins, then ``$PUGLIA_BOT_CONFIG``, then
    ``config.toml`` in the working directory. The flag is True when the
    location was chosen by the caller or the environment rather than defaulted.
    """
    if path is not None:
        return Path(path).expanduser(), True
    from_env = os.getenv(CONFIG_PATH_ENV, "").strip()
    if from_env:
        return Path(from_env).expanduser(), True
    return DEFAULT_CONFIG_PATH, False


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the bot config as a plain dict.

    A missing default ``config.toml`` yields ``{}`` so every section falls
    back to environment variables. A file that was asked for explicitly must
    exist, and a file that fails to parse is reported with its location.
    """
    target, explicit = resolve_config_path(path)
    if not target.is_file():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {target}")
        return {}

    logger.debug("Reading config from %s", target)
    with target.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {target}: {exc}") from exc


__all__ = ["load_raw_config", "resolve_config_path", "CONFIG_PATH_ENV", "DEFAULT_CONFIG_PATH"]
