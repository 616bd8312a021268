"""
Publishing and Cleanup of Locale Files

publish_locales() copies the formatted files from config/locales into the
task's destination folder. Existing files with the same name are
overwritten; other files already in the destination are left alone.

clean() removes the temporary working folders. The pipeline calls it before
a run starts and after it completes.

Example Output:
    ✔ 2 locale(s) copied into i18n : (en_US.json, fr_FR.json)
"""

import shutil
from pathlib import Path
from typing import Iterable, List

from localeapp_sync.errors import LocaleappFilesystemError
from localeapp_sync.utils import console


def publish_locales(locales_dir: Path, dest: Path) -> List[str]:
    """
    Copy every file of locales_dir into dest as UTF-8 text.

    Args:
        locales_dir: The config/locales working directory
        dest: Destination folder, created if needed

    Returns:
        Names of the copied files

    Raises:
        LocaleappFilesystemError: If a file cannot be read or written
    """
    copied = []
    try:
        dest.mkdir(parents=True, exist_ok=True)
        for source in sorted(locales_dir.iterdir()):
            if not source.is_file():
                continue
            (dest / source.name).write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
            copied.append(source.name)
        dest_files = sorted(entry.name for entry in dest.iterdir())
    except OSError as e:
        raise LocaleappFilesystemError(f"Unable to copy locales into {dest}: {e}") from e

    console.success(
        f"{len(dest_files)} locale(s) copied into {console.highlight(str(dest))} "
        f": ({console.highlight(', '.join(dest_files))})"
    )
    console.separator()
    return copied


def clean(folders: Iterable[Path]) -> None:
    """Remove each folder that exists. Missing folders are ignored."""
    for folder in folders:
        if not folder.is_dir():
            continue
        try:
            shutil.rmtree(folder)
        except OSError as e:
            raise LocaleappFilesystemError(f"Unable to remove {folder}: {e}") from e
        console.verbose(f" | removed {folder}")
