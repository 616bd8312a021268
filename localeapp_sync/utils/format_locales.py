"""
Locale Files Formatter

Rewrites the pulled YAML files in config/locales into the requested output
format. Two variants exist:

Structured (json, js):
    - Loads <locale>.yml and keeps only the document under its root locale key
    - Adds a _meta block: polledAt, updatedAt (display strings) and gem
      (the localeapp version line)
    - Serializes to JSON with a 2-space indent
    - js only: wraps it as ``var translate_<locale> = {...};``
    - Renames en-US.yml to en_US.json / en_US.js

YAML (yml, yaml):
    - Renames en-US.yml to en_US.yml, content untouched

Locale Code Normalization:
    Only the first hyphen becomes an underscore (en-US -> en_US). A code such
    as "zh-Hant-TW" becomes "zh_Hant-TW".

Example (en_US.json):
    {
      "user": {
        "name": "Name"
      },
      "_meta": {
        "polledAt": "Tue Jul 01 2014 10:00:00 GMT+0000",
        "updatedAt": "Tue Jul 01 2014 09:00:00 GMT+0000",
        "gem": "localeapp version 0.8.0"
      }
    }

Error Handling:
    Any rename or write failure raises LocaleappFilesystemError and aborts
    the run. So does a rename onto an existing file, e.g. when a pull returns
    both en-US.yml and en_US.yml. A file whose root key is not its locale
    code raises LocaleDocumentError.
"""

import json
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from localeapp_sync.errors import LocaleDocumentError, LocaleappFilesystemError
from localeapp_sync.models import LocaleBatch, Metadata
from localeapp_sync.utils import console

YML_SUFFIX = ".yml"
META_KEY = "_meta"
JS_VARIABLE_PREFIX = "translate_"


def locale_code(filename: str) -> str:
    """en-US.yml -> en-US"""
    if not filename.endswith(YML_SUFFIX) or filename == YML_SUFFIX:
        raise LocaleDocumentError(f"Pulled file {filename} is not a <locale>.yml file")
    return filename[: -len(YML_SUFFIX)]


def normalize_locale(locale: str) -> str:
    """en-US -> en_US (first hyphen only)"""
    return locale.replace("-", "_", 1)


def load_locale_document(path: Path, locale: str) -> Dict[str, Any]:
    """
    Load a pulled YAML file and return the translations under its locale key.

    Raises:
        LocaleDocumentError: If the file is unreadable or not keyed by locale
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LocaleDocumentError(f"Unable to parse {path.name}: {e}") from e
    except OSError as e:
        raise LocaleappFilesystemError(f"Unable to read {path}: {e}") from e

    if not isinstance(document, dict) or locale not in document:
        raise LocaleDocumentError(f"{path.name} has no root key '{locale}'")

    translations = document[locale]
    if translations is None:
        return {}
    if not isinstance(translations, dict):
        raise LocaleDocumentError(f"'{locale}' in {path.name} is not a mapping")
    return translations


def render_json(translations: Dict[str, Any], metadata: Metadata) -> str:
    payload = dict(translations)
    payload[META_KEY] = metadata.as_dict()
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_js(locale: str, translations: Dict[str, Any], metadata: Metadata) -> str:
    variable = JS_VARIABLE_PREFIX + normalize_locale(locale)
    return f"var {variable} = {render_json(translations, metadata)};"


def _rename(source: Path, target: Path) -> None:
    if target != source and target.exists():
        raise LocaleappFilesystemError(
            f"Cannot rename {source.name} to {target.name}: {target.name} already exists"
        )
    try:
        source.replace(target)
    except OSError as e:
        raise LocaleappFilesystemError(f"Unable to rename {source.name} to {target.name}: {e}") from e


def format_structured(
    batch: LocaleBatch,
    locales_dir: Path,
    to_js: bool = False,
    tz: Optional[tzinfo] = None,
) -> List[Path]:
    """
    Convert every pulled YAML file to JSON, or to JavaScript when to_js is set.

    Args:
        batch: Result of pull_locales()
        locales_dir: The config/locales working directory
        to_js: Emit ``var translate_<locale> = ...;`` files instead of JSON
        tz: Timezone for the _meta dates (local time when None)

    Returns:
        Paths of the written files, in batch order
    """
    extension = ".js" if to_js else ".json"
    metadata = Metadata.from_batch(batch, tz)
    written = []

    for filename in batch.files:
        locale = locale_code(filename)
        source = locales_dir / filename
        target = locales_dir / (normalize_locale(locale) + extension)

        translations = load_locale_document(source, locale)
        if to_js:
            content = render_js(locale, translations, metadata)
        else:
            content = render_json(translations, metadata)

        _rename(source, target)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise LocaleappFilesystemError(f"Unable to write {target}: {e}") from e

        console.verbose(f" | {filename} => {target.name}")
        written.append(target)

    return written


def format_yml(batch: LocaleBatch, locales_dir: Path) -> List[Path]:
    """Rename en-US.yml files to en_US.yml without touching their content."""
    renamed = []
    for filename in batch.files:
        locale = locale_code(filename)
        target = locales_dir / (normalize_locale(locale) + YML_SUFFIX)
        _rename(locales_dir / filename, target)
        console.verbose(f" | {filename} => {target.name}")
        renamed.append(target)
    return renamed
