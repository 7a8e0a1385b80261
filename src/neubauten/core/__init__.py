"""Core infrastructure layer - no domain or UI dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console output outside the UI (Rich)
"""

from .config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    PlayerConfig,
    UIConfig,
    create_default_config,
    ensure_directories,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)
from .console import get_console, safe_print
from .output import setup_loguru

__all__ = [
    # Config
    "Config",
    "LibraryConfig",
    "LoggingConfig",
    "PlayerConfig",
    "UIConfig",
    "create_default_config",
    "ensure_directories",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    # Logging
    "setup_loguru",
    # Console
    "get_console",
    "safe_print",
]
