"""
Parsing of localeapp Command Output

localeapp has no machine readable output, so the pipeline interprets its
human readable text. All of that interpretation lives here so that a change
in the gem's wording breaks in one place, covered by tests/test_cli_output.py.

Assumed output shapes:
    localeapp -v             -> "localeapp version 0.8.0\\n"
    localeapp install <key>  -> any text on success,
                                text starting with "error" on a rejected key
"""

from typing import Optional, Tuple

ERROR_PREFIX = "error"
VERSION_FIELD_INDEX = 2


def strip_line_terminator(output: Optional[str]) -> str:
    """Remove one trailing line terminator ("\\n" or "\\r\\n")."""
    if not output:
        return ""
    if output.endswith("\r\n"):
        return output[:-2]
    if output.endswith("\n"):
        return output[:-1]
    return output


def parse_version_output(output: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split ``localeapp -v`` output into the version line and its version token.

    Args:
        output: Raw captured stdout

    Returns:
        (version_line, version) such as ("localeapp version 0.8.0", "0.8.0"),
        or None when nothing was captured

    Raises:
        ValueError: If the line has fewer than three whitespace separated fields
    """
    version_line = strip_line_terminator(output)
    if not version_line:
        return None
    fields = version_line.split()
    if len(fields) <= VERSION_FIELD_INDEX:
        raise ValueError(f"Unrecognized version output: {version_line!r}")
    return version_line, fields[VERSION_FIELD_INDEX]


def is_error_output(output: Optional[str]) -> bool:
    """
    Tell whether ``localeapp install`` rejected the key.

    This is a prefix match on free text: a rejection worded differently by a
    future gem release is reported as success.
    """
    return bool(output) and output.startswith(ERROR_PREFIX)
