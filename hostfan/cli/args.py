from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostfan",
        description="Runs a command on a given list of hostnames.",
    )

    parser.add_argument(
        "-c",
        "--config",
        default="hostfan.json",
        help="Path to config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run the command on every host")
    run.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Override workerCount from the config",
    )
    run.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Override timeoutMillis from the config",
    )

    # render
    subparsers.add_parser("render", help="Show the command each host would run")

    return parser
