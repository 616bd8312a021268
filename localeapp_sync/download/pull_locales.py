"""
Locale Files Fetcher

Pulls locale files from localeapp.com with ``localeapp pull`` and reads the
poll metadata the gem leaves behind.

Workflow:
    1. Create the temporary config/locales output folder
    2. Create the temporary log folder and an empty log/localeapp.yml
    3. Run ``localeapp pull`` (downloads <locale-code>.yml files)
    4. List the pulled files and print a summary with entry counts
    5. Parse log/localeapp.yml for polled_at and updated_at

Working Directories (relative to the task's work_dir):
    - config/locales/: pulled files, e.g. en-US.yml, fr-FR.yml
    - log/localeapp.yml: YAML document such as
        polled_at: 1404208800
        updated_at: 1404205200

Example Output:
    ✔ 2 locale(s) pulled from localeapp.com : (en-US.yml [12], fr-FR.yml [10])

Error Handling:
    - Folder creation failure: LocaleappFilesystemError
    - Non-zero exit of ``localeapp pull``: LocaleappFetchError
    - Missing, empty or malformed log file: LocaleappFetchError
    - Unreadable pulled YAML file: LocaleappFetchError
    Nothing is retried; the caller aborts the run.
"""

from pathlib import Path
from typing import Dict, List

import yaml
from colorama import Fore

from localeapp_sync.errors import LocaleappFetchError, LocaleappFilesystemError
from localeapp_sync.models import LocaleBatch
from localeapp_sync.utils import console
from localeapp_sync.utils.count_entries import count_locale_file
from localeapp_sync.utils.localeapp_cli import Runner

CONFIG_DIR = Path("config")
LOCALES_DIR = CONFIG_DIR / "locales"
LOG_DIR = Path("log")
LOG_FILE = LOG_DIR / "localeapp.yml"


def working_roots(work_dir: Path) -> List[Path]:
    """Directories created during a run and removed before and after it."""
    return [work_dir / CONFIG_DIR, work_dir / LOG_DIR]


def within_working_roots(path: Path, work_dir: Path) -> bool:
    """True when path is a working root or lies under one."""
    target = path.resolve()
    for root in working_roots(work_dir):
        root = root.resolve()
        if target == root or root in target.parents:
            return True
    return False


def prepare_working_dirs(work_dir: Path) -> None:
    """
    Create config/locales, log and an empty log/localeapp.yml.

    Raises:
        LocaleappFilesystemError: If any of them cannot be created
    """
    try:
        console.verbose_write(f' | creating temp "{LOCALES_DIR.as_posix()}" output folder ... ')
        (work_dir / LOCALES_DIR).mkdir(parents=True, exist_ok=True)
        console.verbose_ok()

        console.verbose_write(f' | creating temp "{LOG_DIR.as_posix()}" folder ... ')
        (work_dir / LOG_DIR).mkdir(parents=True, exist_ok=True)
        console.verbose_ok()

        console.verbose_write(f' | creating temp "{LOG_FILE.as_posix()}" log file ... ')
        (work_dir / LOG_FILE).write_text("", encoding="utf-8")
        console.verbose_ok()
    except OSError as e:
        raise LocaleappFilesystemError(f"Unable to create working directories: {e}") from e


def list_locale_files(locales_dir: Path) -> List[str]:
    return sorted(entry.name for entry in locales_dir.iterdir() if entry.is_file())


def read_poll_log(log_file: Path) -> Dict[str, int]:
    """
    Read polled_at and updated_at from the localeapp log file.

    Returns:
        {"polled_at": <epoch seconds>, "updated_at": <epoch seconds>}

    Raises:
        LocaleappFetchError: If the file is missing, empty or lacks a field
    """
    try:
        with log_file.open("r", encoding="utf-8") as f:
            log = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LocaleappFetchError(f"Unable to read {log_file}: {e}") from e

    if not isinstance(log, dict):
        raise LocaleappFetchError(f"{log_file} is empty or not a YAML mapping")

    values = {}
    for field_name in ("polled_at", "updated_at"):
        value = log.get(field_name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise LocaleappFetchError(
                f"{log_file} has no numeric '{field_name}' value (got {value!r})"
            )
        values[field_name] = int(value)
    return values


def describe_locales(locales_dir: Path, files: List[str]) -> str:
    """Build the "en-US.yml [12], fr-FR.yml [10]" part of the summary line."""
    parts = []
    for name in files:
        try:
            count = count_locale_file(locales_dir / name)
        except (OSError, yaml.YAMLError) as e:
            raise LocaleappFetchError(f"Unable to read pulled file {name}: {e}") from e
        parts.append(console.highlight(name) + f" [{count}]")
    return ", ".join(parts)


def pull_locales(runner: Runner, command: str, work_dir: Path, tool_version: str) -> LocaleBatch:
    """
    Fetch locale files into config/locales.

    Args:
        runner: Command runner
        command: localeapp executable name
        work_dir: Root of the working directories
        tool_version: Version line from check_gem(), carried into the batch

    Returns:
        LocaleBatch describing the pulled files

    Raises:
        LocaleappFilesystemError, LocaleappFetchError: See module docstring
    """
    console.verbose("Retrieving locale files")
    prepare_working_dirs(work_dir)

    console.verbose_write(" | fetching locales from localeapp.com ... ")
    result = runner([command, "pull"], work_dir)
    if result.returncode != 0:
        console.verbose("FAILED", Fore.RED)
        raise LocaleappFetchError(
            f"'{command} pull' exited with status {result.returncode}: {result.stdout.strip()}"
        )

    locales_dir = work_dir / LOCALES_DIR
    files = list_locale_files(locales_dir)
    console.verbose(f"{len(files)} file(s) pulled", Fore.GREEN)
    console.verbose(console.muted(result.stdout))
    if not files:
        console.warning(f"'{command} pull' returned no locale files")

    console.success(
        f"{len(files)} locale(s) pulled from localeapp.com : "
        f"({describe_locales(locales_dir, files)})"
    )
    console.separator()

    log = read_poll_log(work_dir / LOG_FILE)
    return LocaleBatch(
        polled_at=log["polled_at"],
        updated_at=log["updated_at"],
        files=files,
        tool_version=tool_version,
    )
