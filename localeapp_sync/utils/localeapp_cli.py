"""
localeapp Gem Invocation

Runs the localeapp command line tool as a blocking subprocess and implements
the two checks made before any file is pulled:

    1. check_gem(): the gem is installed (``localeapp -v``)
    2. setup_project(): the project API key is accepted (``localeapp install``)

Every call is attempted once. Commands run with the task's work_dir as the
current directory, since localeapp reads and writes config/ and log/
relative to it.

Runner Contract:
    A runner is any callable ``(args, cwd) -> CommandResult``. run_command()
    is the real one; tests pass tests.mocks.MockLocaleappCLI instead.
"""

import subprocess
from pathlib import Path
from typing import Callable, Sequence

from colorama import Fore

from localeapp_sync.errors import InvalidCredentialError, MissingDependencyError
from localeapp_sync.models import CommandResult
from localeapp_sync.utils import console
from localeapp_sync.utils.cli_output import is_error_output, parse_version_output

Runner = Callable[[Sequence[str], Path], CommandResult]


def run_command(args: Sequence[str], cwd: Path) -> CommandResult:
    """
    Run a command and capture its standard output.

    Args:
        args: Executable followed by its arguments
        cwd: Working directory of the child process

    Returns:
        CommandResult with exit status and decoded stdout

    Raises:
        FileNotFoundError: If the executable does not exist
    """
    completed = subprocess.run(
        list(args),
        cwd=str(cwd),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        universal_newlines=True,
        check=False,
    )
    return CommandResult(returncode=completed.returncode, stdout=completed.stdout or "")


def check_gem(runner: Runner, command: str, cwd: Path) -> str:
    """
    Check that the localeapp gem is installed.

    ``localeapp -v`` prints something like "localeapp version 0.8.0" followed
    by a newline.

    Args:
        runner: Command runner
        command: localeapp executable name
        cwd: Working directory for the command

    Returns:
        The version line, e.g. "localeapp version 0.8.0"

    Raises:
        MissingDependencyError: If nothing is printed, the executable is
            missing or cannot be run, or the output is not a version line
    """
    console.verbose(f"Looking for {command} gem")

    try:
        result = runner([command, "-v"], cwd)
    except FileNotFoundError as e:
        raise MissingDependencyError(f"No {command} gem installed") from e
    except OSError as e:
        raise MissingDependencyError(f"Unable to run {command}: {e}") from e

    try:
        parsed = parse_version_output(result.stdout)
    except ValueError as e:
        raise MissingDependencyError(f"No usable {command} gem installed: {e}") from e

    if parsed is None:
        raise MissingDependencyError(f"No {command} gem installed")

    version_line, version = parsed
    console.success(f"{command} gem installed ({console.highlight('v' + version, Fore.WHITE)})")
    console.separator()
    return version_line


def setup_project(runner: Runner, command: str, key: str, cwd: Path) -> None:
    """
    Register the project key with localeapp.

    A key identifies both a localeapp user and a project, so there is one key
    per project.

    Raises:
        InvalidCredentialError: If the gem answers with an error
    """
    console.verbose("Verifying api key")

    result = runner([command, "install", key], cwd)
    console.verbose(console.muted(result.stdout))

    if is_error_output(result.stdout):
        raise InvalidCredentialError("Your API key seems to be invalid")

    console.success(f"Key {console.highlight(key, Fore.WHITE)} valid")
    console.separator()
