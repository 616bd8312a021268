"""
Task Configuration Loader

Builds validated TaskConfig objects from a JSON task file, the environment
and command line overrides.

Configuration File:
    Location: localeapp_tasks.json in the current directory (override with
    --config). It must not live under config/, which is a working directory
    removed on every run.
    Format:
        {
            "targets": {
                "dist": {
                    "key": "your_localeapp_project_key",
                    "format": "json",
                    "dest": "app/i18n",
                    "command": "localeapp"
                },
                "rails": {
                    "format": "yml",
                    "dest": "config_out/locales"
                }
            }
        }

Environment:
    LOCALEAPP_API_KEY: used when a target has no "key"

Precedence:
    command line flag > target entry in the file > environment > default

Validation happens here, before the pipeline runs any command: an unknown
format raises UnsupportedFormatError, a missing key or dest, or a dest inside
config/ or log/, raises TaskConfigError.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from localeapp_sync.download.pull_locales import within_working_roots, working_roots
from localeapp_sync.errors import TaskConfigError
from localeapp_sync.models import DEFAULT_COMMAND, OutputFormat, TaskConfig

DEFAULT_TASK_FILE = Path("localeapp_tasks.json")
API_KEY_ENV = "LOCALEAPP_API_KEY"
ADHOC_TARGET_NAME = "default"


def load_task_file(path: Path) -> Dict[str, Dict]:
    """
    Read the targets of a task file.

    Returns:
        Mapping of target name to its raw settings

    Raises:
        TaskConfigError: If the file is unreadable or has no "targets" object
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            content = json.load(f)
    except OSError as e:
        raise TaskConfigError(f"Unable to read task file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TaskConfigError(f"Task file {path} is not valid JSON: {e}") from e

    targets = content.get("targets") if isinstance(content, dict) else None
    if not isinstance(targets, dict) or not targets:
        raise TaskConfigError(f"Task file {path} defines no targets")
    for name, settings in targets.items():
        if not isinstance(settings, dict):
            raise TaskConfigError(f"Target '{name}' in {path} must be an object")
    return targets


def build_task_config(
    name: str,
    settings: Mapping[str, object],
    work_dir: Path,
    env: Optional[Mapping[str, str]] = None,
) -> TaskConfig:
    """
    Validate one target's settings.

    Args:
        name: Target name
        settings: Raw "key", "format", "dest" and optional "command" values
        work_dir: Root for working directories; relative dest paths resolve
            against it
        env: Environment used for the API key fallback (os.environ when None)

    Raises:
        UnsupportedFormatError: If "format" is not yml, yaml, json or js
        TaskConfigError: If "key" or "dest" is missing, or "dest" lies under
            the config/ or log/ working folders
    """
    env = os.environ if env is None else env

    output_format = OutputFormat.parse(settings.get("format"))

    key = settings.get("key") or env.get(API_KEY_ENV)
    if not key or not str(key).strip():
        raise TaskConfigError(
            f"Target '{name}' has no API key. Set \"key\" or the {API_KEY_ENV} variable."
        )

    dest = settings.get("dest")
    if not dest:
        raise TaskConfigError(f"Target '{name}' has no \"dest\" folder")
    dest_path = Path(str(dest)).expanduser()
    if not dest_path.is_absolute():
        dest_path = work_dir / dest_path
    if within_working_roots(dest_path, work_dir):
        raise TaskConfigError(
            f"Target '{name}' publishes into {dest_path}, which lies in a working "
            f"folder removed after every run ({', '.join(str(root) for root in working_roots(work_dir))})"
        )

    command = settings.get("command") or DEFAULT_COMMAND

    return TaskConfig(
        name=name,
        key=str(key).strip(),
        output_format=output_format,
        dest=dest_path,
        command=str(command),
        work_dir=work_dir,
    )


def resolve_targets(
    names: Sequence[str],
    overrides: Mapping[str, Optional[str]],
    work_dir: Path,
    task_file: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[TaskConfig]:
    """
    Select and validate the targets to run.

    Without a task file, the command line overrides alone describe a single
    target named "default".

    Args:
        names: Requested target names; empty means every target in the file
        overrides: Command line values for key, format, dest and command
        work_dir: Root for working directories
        task_file: Explicit task file; DEFAULT_TASK_FILE under work_dir is
            used when it exists and none is given
        env: Environment for the API key fallback

    Raises:
        TaskConfigError: For an unknown target name or nothing to run
        UnsupportedFormatError: For an unknown format
    """
    given = {field: value for field, value in overrides.items() if value}

    if task_file is None:
        default_file = work_dir / DEFAULT_TASK_FILE
        task_file = default_file if default_file.is_file() else None

    if task_file is None:
        if names:
            raise TaskConfigError(
                f"No task file found, cannot select target(s): {', '.join(names)}"
            )
        if not given:
            raise TaskConfigError(
                f"No {DEFAULT_TASK_FILE} found. Pass --key, --format and --dest "
                "or point --config to a task file."
            )
        return [build_task_config(ADHOC_TARGET_NAME, given, work_dir, env)]

    targets = load_task_file(task_file)
    unknown = [name for name in names if name not in targets]
    if unknown:
        raise TaskConfigError(
            f"Unknown target(s): {', '.join(unknown)}. "
            f"Available: {', '.join(targets)}"
        )

    selected = list(names) if names else list(targets)
    return [
        build_task_config(name, {**targets[name], **given}, work_dir, env)
        for name in selected
    ]
