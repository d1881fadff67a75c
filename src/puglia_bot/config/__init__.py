"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .local_llm import LocalLLM
from .events import Events

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
local_llm = LocalLLM(_RAW_CONFIG)
events = Events(_RAW_CONFIG)

logging.basicConfig(
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    level=_LOG_LEVELS.get(core.LOG_LEVEL.lower(), logging.INFO),
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("telethon").setLevel(logging.WARNING)


class Config:
    core = core
    local_llm = local_llm
    events = events


__all__ = ["core", "local_llm", "events", "Config"]
