"""Command line interface for asset uploader."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich.logging import RichHandler

from . import __version__
from .orchestrator import UploadOrchestrator
from .services.inputs import ActionInputs, input_env_name
from .services.reporter import ActionReporter

logger = logging.getLogger(__name__)

INPUT_FLAGS = ("upload_url", "asset_path", "token")
ENV_FILE_KEYS = frozenset([input_env_name(name) for name in INPUT_FLAGS] + ["LOG_LEVEL"])
DEFAULT_ENV_FILE = Path(".env")


class CLIError(RuntimeError):
    """Raised when CLI validation/execution fails."""


def _resolve_log_level(debug: bool, log_level: Optional[str]) -> Optional[int]:
    """Return the requested level, or None when nothing asked for logs."""
    requested = "DEBUG" if debug else (log_level or os.getenv("LOG_LEVEL"))
    if not requested:
        return None
    level = logging.getLevelName(requested.upper())
    return level if isinstance(level, int) else logging.INFO


def _setup_logging(debug: bool, silent: bool, log_level: Optional[str]) -> str:
    """
    Configure the root logger and return the effective mode.

    Silent unless --debug, --log-level or LOG_LEVEL asks for output.
    Workflow commands on stdout are unaffected; logs go through rich.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    logging.disable(logging.NOTSET)

    level = None if silent else _resolve_log_level(debug, log_level)
    if level is None:
        logging.disable(logging.CRITICAL)
        return "silent"

    root_logger.addHandler(
        RichHandler(rich_tracebacks=True, markup=False, show_time=False, show_path=False)
    )
    root_logger.setLevel(level)
    return logging.getLevelName(level)


def _parse_env_line(raw_line: str) -> Optional[Tuple[str, str]]:
    line = raw_line.strip()
    if line.startswith("export "):
        line = line[len("export ") :].lstrip()

    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key or key.startswith("#"):
        return None

    value = value.strip()
    if len(value) >= 2 and value[0] in {"'", '"'} and value[-1] == value[0]:
        value = value[1:-1]
    return key, value


def _load_env_file(path: Path) -> List[str]:
    """
    Export the uploader's keys from a dotenv file.

    Only ``INPUT_*`` names this tool reads and ``LOG_LEVEL`` are taken;
    variables already in the environment win. Returns the keys applied.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CLIError(f"env file not found: {path}") from None
    except OSError as exc:
        raise CLIError(f"could not read env file {path}: {exc}") from exc

    applied = []
    for raw_line in content.splitlines():
        entry = _parse_env_line(raw_line)
        if entry is None:
            continue
        key, value = entry
        if key in ENV_FILE_KEYS and key not in os.environ:
            os.environ[key] = value
            applied.append(key)
    return applied


def _apply_input_overrides(args: argparse.Namespace) -> None:
    """Export flag values as ``INPUT_*`` variables, overriding the env."""
    for name in INPUT_FLAGS:
        value = getattr(args, name, None)
        if value is not None:
            os.environ[input_env_name(name)] = value


async def _run_upload(reporter: ActionReporter) -> None:
    orchestrator = UploadOrchestrator(ActionInputs(), reporter)
    try:
        await orchestrator.run()
    except Exception as exc:
        # Pattern resolution is not guarded by the orchestrator itself.
        reporter.set_failed(exc)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asset-uploader",
        description="Upload files matching a pattern to a release upload URL.",
    )
    parser.add_argument(
        "--upload-url",
        dest="upload_url",
        default=None,
        help="Upload endpoint URL (default from INPUT_UPLOAD_URL)",
    )
    parser.add_argument(
        "--asset-path",
        dest="asset_path",
        default=None,
        help="File or glob pattern, one per line, '!' to exclude (default from INPUT_ASSET_PATH)",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Token sent as 'authorization: token <value>' (default from INPUT_TOKEN)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    parser.add_argument("--silent", action="store_true", help="Disable logs")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (DEBUG/INFO/WARNING/ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"asset-uploader {__version__}",
    )
    return parser


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    env_file = args.env_file
    if env_file is None and DEFAULT_ENV_FILE.is_file():
        env_file = DEFAULT_ENV_FILE
    env_keys: List[str] = []
    if env_file is not None:
        try:
            env_keys = _load_env_file(env_file)
        except CLIError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    _apply_input_overrides(args)
    effective_log_mode = _setup_logging(
        debug=args.debug,
        silent=args.silent,
        log_level=args.log_level,
    )
    logger.debug(
        "Logging: %s, env file: %s (%s)",
        effective_log_mode,
        env_file or "-",
        ", ".join(env_keys) or "no keys",
    )

    reporter = ActionReporter()
    try:
        asyncio.run(_run_upload(reporter))
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130
    return reporter.exit_code


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
