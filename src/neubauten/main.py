"""
Neubauten - main entry point for the interactive session
"""

from loguru import logger

from neubauten.core.config import Config, ensure_directories, get_log_file_path
from neubauten.core.console import safe_print
from neubauten.core.output import setup_loguru
from neubauten.domain.session import LocalSession, SessionError


def start(config: Config) -> int:
    """
    Start logging and the playback session, then run the blessed UI.

    Args:
        config: Loaded configuration

    Returns:
        Exit code (0 for success, 1 if the session could not start)
    """
    ensure_directories(config)
    log_file = get_log_file_path(config)
    setup_loguru(
        log_file,
        level=config.logging.level,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
    )

    session = LocalSession(config)
    try:
        session.start()
    except SessionError as e:
        logger.error(f"Session failed to start: {e}")
        safe_print(f"❌ {e}", style="red")
        session.close()
        return 1

    try:
        from neubauten.ui.blessed.app import run_interactive_ui

        run_interactive_ui(session, config)
    finally:
        session.close()

    return 0
