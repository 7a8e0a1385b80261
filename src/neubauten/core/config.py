"""
Configuration management for Neubauten
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class LibraryConfig:
    """Where playlists and the tracks they reference live."""

    playlists_dir: str = field(
        default_factory=lambda: str(Path.home() / "Music" / "Playlists")
    )
    library_root: str = field(default_factory=lambda: str(Path.home() / "Music"))


@dataclass
class PlayerConfig:
    """Configuration for the mpv player."""

    mpv_socket_path: Optional[str] = None
    volume: int = 50
    poll_interval: float = 0.5  # Seconds between end-of-track checks


@dataclass
class UIConfig:
    """Configuration for the terminal interface."""

    poll_timeout_ms: int = 100  # Bounded keyboard wait per loop iteration
    show_durations: bool = True

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            ValueError: If configuration values are invalid
            TypeError: If poll_timeout_ms is not a number
        """
        if self.poll_timeout_ms <= 0:
            raise ValueError(
                f"poll_timeout_ms must be positive, got {self.poll_timeout_ms}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    log_file: Optional[str] = None  # Default: <data dir>/neubauten.log
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration object."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "neubauten"
    return Path.home() / ".config" / "neubauten"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "neubauten"
    return Path.home() / ".local" / "share" / "neubauten"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks the current working directory first, then
    XDG_CONFIG_HOME/neubauten (or ~/.config/neubauten).
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config
    return get_config_dir() / "config.toml"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file, defaulting to the data directory."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "neubauten.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Neubauten Configuration

[library]
# Directory containing .m3u / .m3u8 playlists
playlists_dir = "~/Music/Playlists"

# Root used to resolve relative track paths inside playlists
library_root = "~/Music"

[player]
# Path for mpv socket (a temporary path is used if not specified)
# mpv_socket_path = "/tmp/neubauten-mpv"

# Default volume (0-100)
volume = 50

# Seconds between end-of-track checks
poll_interval = 0.5

[ui]
# Maximum time (milliseconds) to wait for a key before checking notifications
poll_timeout_ms = 100

# Show track duration in the status line
show_durations = true

[logging]
# Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/neubauten/neubauten.log)
# log_file = "/path/to/neubauten.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Environment variables take precedence over TOML values."""
    playlists_dir = os.environ.get("NEUBAUTEN_PLAYLISTS_DIR")
    library_root = os.environ.get("NEUBAUTEN_LIBRARY_ROOT")
    log_level = os.environ.get("NEUBAUTEN_LOG_LEVEL")

    if playlists_dir:
        config.library.playlists_dir = str(Path(playlists_dir).expanduser())
    if library_root:
        config.library.library_root = str(Path(library_root).expanduser())
    if log_level and log_level.upper() in VALID_LOG_LEVELS:
        config.logging.level = log_level.upper()

    return config


def parse_config(toml_data: dict) -> Config:
    """Map parsed TOML sections onto a Config, keeping defaults for gaps."""
    config = Config()

    if "library" in toml_data:
        library_data = toml_data["library"]
        config.library = LibraryConfig(
            playlists_dir=str(
                Path(
                    library_data.get("playlists_dir", config.library.playlists_dir)
                ).expanduser()
            ),
            library_root=str(
                Path(
                    library_data.get("library_root", config.library.library_root)
                ).expanduser()
            ),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            mpv_socket_path=player_data.get("mpv_socket_path"),
            volume=player_data.get("volume", config.player.volume),
            poll_interval=player_data.get(
                "poll_interval", config.player.poll_interval
            ),
        )

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            poll_timeout_ms=ui_data.get("poll_timeout_ms", config.ui.poll_timeout_ms),
            show_durations=ui_data.get("show_durations", config.ui.show_durations),
        )
        try:
            config.ui.validate()
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid UI configuration ({e}), using defaults")
            config.ui = UIConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        level = str(logging_data.get("level", config.logging.level)).upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Unknown log level {level!r}, using INFO")
            level = "INFO"
        config.logging = LoggingConfig(
            level=level,
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
        )

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - NEUBAUTEN_PLAYLISTS_DIR
    - NEUBAUTEN_LIBRARY_ROOT
    - NEUBAUTEN_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        return _apply_env_overrides(Config())

    return _apply_env_overrides(parse_config(toml_data))


def ensure_directories(config: Config) -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
    get_log_file_path(config).parent.mkdir(parents=True, exist_ok=True)
