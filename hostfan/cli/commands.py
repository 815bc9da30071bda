from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from hostfan.config import ConfigError, FanoutConfig, load_config, validate_config
from hostfan.executor import Dispatcher, LaunchFailure, RunResult, Success, TimedOut

from .args import build_parser

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _setup_logging(args.verbose)

        match args.command:
            case "run":
                return cmd_run(args)
            case "render":
                return cmd_render(args)
            case _:
                return 2

    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.__cause__ is not None:
            print(f"- Caused by: {exc.__cause__}", file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    config = _config_with_overrides(args)
    rr = Dispatcher(config).run()
    _print_result(rr, config)
    return 1 if rr.failed else 0


def cmd_render(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    for task in Dispatcher(config).tasks():
        print(f"{task.hostname}: {task.command}")
    return 0


def _setup_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _config_with_overrides(args: argparse.Namespace) -> FanoutConfig:
    config = load_config(args.config)
    overrides = {}

    if args.workers is not None:
        overrides["worker_count"] = args.workers
    if args.timeout_ms is not None:
        overrides["timeout_ms"] = args.timeout_ms

    if overrides:
        config = dataclasses.replace(config, **overrides)
        validate_config(config)

    return config


def _print_result(rr: RunResult, config: FanoutConfig) -> None:
    for hostname, outcome in rr.pairs():
        match outcome:
            case Success(stdout=stdout, stderr=stderr, returncode=returncode):
                print(
                    f"OK {hostname}: [stdout: '{stdout.strip()}', stderr: '{stderr.strip()}'], exit code = {returncode}"
                )
            case LaunchFailure(cause=cause):
                print(
                    f"ERROR {hostname}: command launch error: {cause}",
                    file=sys.stderr,
                )
            case TimedOut():
                print(
                    f"TIMEOUT {hostname}: execution timeout after {config.timeout_ms}ms",
                    file=sys.stderr,
                )
