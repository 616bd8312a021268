"""
Command Line Interface for Localeapp Sync

Usage:
    localeapp-sync                      # every target of localeapp_tasks.json
    localeapp-sync dist rails           # selected targets
    localeapp-sync --key KEY --format json --dest app/i18n
    localeapp-sync dist --verbose

Exit Codes:
    0: every target completed
    1: a target failed (single red error line)
"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

from localeapp_sync.core import run_targets
from localeapp_sync.errors import LocaleappError
from localeapp_sync.models import OutputFormat
from localeapp_sync.utils import console
from localeapp_sync.utils.localeapp_cli import Runner, run_command
from localeapp_sync.utils.task_config import DEFAULT_TASK_FILE, resolve_targets


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localeapp-sync",
        description="Pull locale files from localeapp.com into your project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("targets", nargs="*", help="Target names from the task file (default: all)")
    parser.add_argument("--config", type=Path, help=f"Task file (default: {DEFAULT_TASK_FILE})")
    parser.add_argument("--key", help="localeapp project API key")
    parser.add_argument(
        "--format",
        help=f"Output format: {', '.join(OutputFormat.supported())}",
    )
    parser.add_argument("--dest", help="Destination folder for locale files")
    parser.add_argument("--command", help="localeapp executable (default: localeapp)")
    parser.add_argument("--work-dir", type=Path, default=None, help="Root of the temporary folders")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show every step")
    return parser


def main(argv: Optional[Sequence[str]] = None, runner: Runner = run_command) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument vector (sys.argv[1:] when None)
        runner: Command runner for localeapp calls

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    console.set_verbose(args.verbose)

    work_dir = (args.work_dir or Path.cwd()).resolve()
    overrides = {
        "key": args.key,
        "format": args.format,
        "dest": args.dest,
        "command": args.command,
    }

    try:
        configs = resolve_targets(args.targets, overrides, work_dir, args.config)
        run_targets(configs, runner)
    except LocaleappError as e:
        console.error(f"\n❌ {e}")
        return 1
    return 0
