import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from gitbrowse.config import Settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_port(value: str) -> int:
    """Parse a TCP port number."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid port '{value}'. Use a number, e.g. 3000")
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"Port out of range: {port}")
    return port


def _error_exit(msg: str) -> None:
    """Print error message to stderr and exit with code 1."""
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitbrowse",
        description="Serve a read-only hypermedia API over bare git repositories.",
    )
    parser.add_argument(
        "--repos",
        metavar="DIR",
        help="Repository storage root (default: $GITBROWSE_REPOS_ROOT or ./repos)",
    )
    parser.add_argument(
        "--port",
        type=_parse_port,
        help="Port to listen on (default: $PORT or 3000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: INFO)",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    settings = Settings.from_env()
    overrides = {}
    if args.repos:
        overrides["repos_root"] = Path(args.repos).resolve()
    if args.port is not None:
        overrides["port"] = args.port
    return dataclasses.replace(settings, **overrides)


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = resolve_settings(args)
    except ValueError as e:
        _error_exit(str(e))
        return

    if not settings.repos_root.is_dir():
        _error_exit(f"Repository root is not a directory: {settings.repos_root}")
        return

    from gitbrowse.web.server import launch

    try:
        launch(settings, log_level=args.log_level)
    except KeyboardInterrupt:
        print("\nShutting down.")


if __name__ == "__main__":
    main()
