"""
Core Orchestration Module for Localeapp Sync

Runs the sync pipeline for one or more configured targets. Each target goes
through the same steps, strictly in order:

Workflow Steps:
    0. Check the requested output format (before anything else happens)
    1. Remove leftover config/ and log/ working folders
    2. Check that the localeapp gem is installed (localeapp -v)
    3. Register the project key (localeapp install <key>)
    4. Pull locale files into config/locales (localeapp pull)
    5. Format files as yml/yaml, json or js
    6. Copy the formatted files into the destination folder
    7. Remove the config/ and log/ working folders

Error Handling:
    Every step raises a LocaleappError subclass on failure and nothing is
    retried. Working folders are only removed after a successful run, so a
    failed run may leave config/ and log/ behind; the next run removes them
    in step 1.

Concurrency:
    Single threaded and blocking. Two runs sharing the same work_dir are not
    supported.

Usage:
    from localeapp_sync.core import run_task
    run_task(config)
"""

from datetime import tzinfo
from typing import Iterable, List, Optional

from colorama import Fore

from localeapp_sync.download.pull_locales import (
    LOCALES_DIR,
    pull_locales,
    within_working_roots,
    working_roots,
)
from localeapp_sync.errors import TaskConfigError
from localeapp_sync.models import OutputFormat, TaskConfig
from localeapp_sync.utils import console
from localeapp_sync.utils.format_locales import format_structured, format_yml
from localeapp_sync.utils.localeapp_cli import Runner, check_gem, run_command, setup_project
from localeapp_sync.utils.publish_locales import clean, publish_locales


def run_task(
    config: TaskConfig,
    runner: Runner = run_command,
    tz: Optional[tzinfo] = None,
) -> List[str]:
    """
    Execute the complete sync pipeline for one target.

    Args:
        config: Validated target configuration
        runner: Command runner used for every localeapp call
        tz: Timezone for the _meta dates of json/js outputs (local when None)

    Returns:
        Names of the files copied into config.dest

    Raises:
        UnsupportedFormatError: If config.output_format is not supported
        TaskConfigError: If config.dest lies under config/ or log/
        LocaleappError: From any failed step
    """
    output_format = config.output_format
    if not isinstance(output_format, OutputFormat):
        output_format = OutputFormat.parse(output_format)
    work_dir = config.work_dir
    roots = working_roots(work_dir)
    if within_working_roots(config.dest, work_dir):
        raise TaskConfigError(
            f"Target '{config.name}' publishes into {config.dest}, which is removed after the run"
        )

    console.print_colored(f"\nRunning localeapp:{config.name}", Fore.CYAN)
    clean(roots)

    tool_version = check_gem(runner, config.command, work_dir)
    setup_project(runner, config.command, config.key, work_dir)
    batch = pull_locales(runner, config.command, work_dir, tool_version)

    locales_dir = work_dir / LOCALES_DIR
    if output_format is OutputFormat.JS:
        console.verbose("Formatting files to Javascript")
        format_structured(batch, locales_dir, to_js=True, tz=tz)
    elif output_format is OutputFormat.JSON:
        console.verbose("Formatting files to JSON")
        format_structured(batch, locales_dir, to_js=False, tz=tz)
    else:
        console.verbose("Formatting files to YML")
        format_yml(batch, locales_dir)
    console.separator()

    copied = publish_locales(locales_dir, config.dest)

    clean(roots)
    return copied


def run_targets(
    configs: Iterable[TaskConfig],
    runner: Runner = run_command,
    tz: Optional[tzinfo] = None,
) -> List[str]:
    """
    Run several targets in order, stopping at the first failure.

    Returns:
        Names of all published files, target after target
    """
    published = []
    for config in configs:
        published.extend(run_task(config, runner, tz))
    console.print_colored("\n✅ All targets completed.", Fore.GREEN)
    return published
