"""CLI entry point for taskcache."""

import argparse
import asyncio
from pathlib import Path

from . import __version__
from .cli import commands
from .config import Settings
from .factory import open_coordinator
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskcache",
        description="Manage tasks stored locally and on a remote task API",
    )
    parser.add_argument(
        "--task-root",
        type=Path,
        default=None,
        help="Directory holding the local task files (default: .tasks)",
    )
    parser.add_argument(
        "--remote-url",
        default=None,
        help="Base URL of the remote task API (default: in-memory remote)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List all tasks")
    list_parser.add_argument("--active", action="store_true", help="Only show active tasks")
    list_parser.set_defaults(handler=commands.cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one task")
    show_parser.add_argument("task_id")
    show_parser.set_defaults(handler=commands.cmd_show)

    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("title")
    add_parser.add_argument("-d", "--description", default="")
    add_parser.set_defaults(handler=commands.cmd_add)

    for name, handler, help_text in (
        ("complete", commands.cmd_complete, "Mark a task completed"),
        ("activate", commands.cmd_activate, "Mark a task active again"),
        ("delete", commands.cmd_delete, "Delete a task"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("task_id")
        sub.set_defaults(handler=handler)

    clear_parser = subparsers.add_parser("clear-completed", help="Delete completed tasks")
    clear_parser.set_defaults(handler=commands.cmd_clear_completed)

    refresh_parser = subparsers.add_parser(
        "refresh", help="Reload tasks from the remote API and list them"
    )
    refresh_parser.add_argument("--active", action="store_true", help="Only show active tasks")
    refresh_parser.set_defaults(handler=commands.cmd_refresh)

    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args; unset args fall back to TASKCACHE_* env vars."""
    settings_kwargs: dict = {}
    if args.task_root:
        settings_kwargs["task_root"] = args.task_root
    if args.remote_url:
        settings_kwargs["remote_url"] = args.remote_url
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


async def run(settings: Settings, args: argparse.Namespace) -> int:
    async with open_coordinator(settings) as coordinator:
        return await args.handler(coordinator, args)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    setup_logging(settings.verbose, settings.log_file)

    exit_code = asyncio.run(run(settings, args))
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
