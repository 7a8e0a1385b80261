"""
Neubauten CLI - argument parsing and entry point
"""

import argparse
from pathlib import Path

from neubauten import __version__
from neubauten.core.config import VALID_LOG_LEVELS, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neubauten",
        description="Neubauten - keyboard-driven playlist browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: ./config.toml or ~/.config/neubauten)",
    )
    parser.add_argument(
        "--playlists-dir",
        help="Directory containing .m3u/.m3u8 playlists (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Log level for the log file (overrides config)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the neubauten command."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.playlists_dir:
        config.library.playlists_dir = args.playlists_dir
    if args.log_level:
        config.logging.level = args.log_level

    # Deferred so --help and --version stay fast
    from neubauten.main import start

    return start(config)


if __name__ == "__main__":
    raise SystemExit(main())
