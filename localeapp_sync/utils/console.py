"""
Console Output Helpers

Colored terminal output shared by every pipeline step. Two channels exist:

    - Regular output: always printed (success lines, summaries, errors)
    - Verbose output: only printed when verbose mode is enabled with
      set_verbose(True) (the --verbose flag of the CLI)

Color conventions:
    - Fore.GREEN: success marks and "OK"
    - Fore.CYAN: step headers
    - Fore.BLUE: file and directory names
    - Fore.YELLOW: warnings
    - Fore.RED: fatal errors

Example Output:
    ✔ localeapp gem installed (v0.8.0)
    ✔ Key abc123 valid
    ✔ 2 locale(s) pulled from localeapp.com : (en-US.yml [12], fr-FR.yml [10])
"""

from colorama import Fore, Style, init

init(autoreset=True)

CHECK_MARK = "✔ "
SEPARATOR = "-" * 34

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Enable or disable the verbose channel."""
    global _verbose
    _verbose = enabled


def is_verbose() -> bool:
    return _verbose


def print_colored(text: str, color: str = "") -> None:
    """
    Print text in the given colorama color.

    Args:
        text: The message to print
        color: A colorama.Fore value, or "" for plain output

    Example:
        print_colored("Formatting files to JSON", Fore.CYAN)
    """
    if color:
        print(color + text + Style.RESET_ALL)
    else:
        print(text)


def success(text: str) -> None:
    print(Fore.GREEN + CHECK_MARK + Style.RESET_ALL + text)


def warning(text: str) -> None:
    print_colored(text, Fore.YELLOW)


def error(text: str) -> None:
    print_colored(text, Fore.RED)


def highlight(text: str, color: str = Fore.BLUE) -> str:
    """Wrap a fragment in color for use inside a longer line."""
    return color + text + Style.RESET_ALL


def muted(text: str) -> str:
    return Style.DIM + text + Style.RESET_ALL


def verbose(text: str, color: str = "") -> None:
    """Print a full line on the verbose channel."""
    if _verbose:
        print_colored(text, color)


def verbose_write(text: str) -> None:
    """Print on the verbose channel without a trailing newline."""
    if _verbose:
        print(text, end="", flush=True)


def verbose_ok() -> None:
    verbose("OK", Fore.GREEN)


def separator() -> None:
    verbose(SEPARATOR)
