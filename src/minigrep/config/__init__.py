"""Configuration management."""
from minigrep.config.settings import Config, load_env_files
from minigrep.config.constants import *

__all__ = [
    "Config",
    "load_env_files",
]
