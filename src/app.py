"""Application entry point for the mission relay classifier."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

from art import tprint

import settings
from adapters.console_renderer import ConsoleRenderer
from adapters.message_source import iter_sources
from core.chain import ChainManager, DispatchSummary, build_default_chain
from core.config import OUTPUT_FORMATS, PAYLOAD_POLICIES, ChainConfig, OutputConfig

NAME = "MISSION RELAY"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/mission-relay.log"


def _log_file_handler(file_cfg: dict) -> logging.Handler:
    """Open the rotating log file, relative paths resolving against the project root."""

    path = file_cfg.get("path", DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(settings.PROJECT_ROOT, path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def build_log_handlers(config: dict, level: int) -> list[logging.Handler]:
    """Return the handlers requested by the logging block of config.json."""

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_log_file_handler(file_cfg))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def _configure_logging(config: dict) -> None:
    if not config.get("enabled", False):
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    handlers = build_log_handlers(config, level)
    if handlers:
        logging.basicConfig(level=level, handlers=handlers)


def _build_manager(args: argparse.Namespace) -> ChainManager:
    chain_config: ChainConfig = settings.CHAIN
    if args.payload_policy:
        chain_config = replace(chain_config, payload_policy=args.payload_policy)

    output_config: OutputConfig = settings.OUTPUT
    if args.format:
        output_config = replace(output_config, format=args.format)

    renderer = ConsoleRenderer.from_config(output_config)
    return ChainManager(renderer, build_default_chain(chain_config))


def _run(manager: ChainManager, messages: Iterable[str]) -> DispatchSummary:
    logger = logging.getLogger(__name__)
    summary = manager.dispatch_all(messages)
    logger.info(
        "Dispatch complete: messages=%s, matched=%s, unrecognized=%s, malformed=%s, failed=%s",
        summary.total,
        summary.matched,
        summary.unrecognized,
        summary.malformed,
        summary.failed,
    )
    return summary


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="mission-relay")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Override the configured output format")
    parser.add_argument(
        "--payload-policy",
        choices=PAYLOAD_POLICIES,
        help="How to treat JSON objects that do not fit the payload schema",
    )
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Classify every line of the given files")
    run_parser.add_argument(
        "paths",
        nargs="*",
        help="Message files, one message per line ('-' reads stdin). Defaults to the built-in sample.",
    )
    classify_parser = subparsers.add_parser("classify", help="Classify a single message")
    classify_parser.add_argument("message")

    args = parser.parse_args(argv)
    # JSON mode keeps stdout machine-readable.
    if not args.no_banner and (args.format or settings.OUTPUT.format) != "json":
        _print_banner()
    _configure_logging(settings.LOGGING or {})

    manager = _build_manager(args)
    if args.command == "classify":
        manager.dispatch(args.message)
        return
    _run(manager, iter_sources(getattr(args, "paths", [])))


if __name__ == "__main__":
    main()
