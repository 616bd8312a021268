"""
Localeapp Sync - Main Entry Point

Runs the sync pipeline from a source checkout without installing the
package.

Usage:
    python3 run.py [TARGET ...] [--config PATH] [--key KEY] [--format FMT]
                   [--dest DIR] [--command BIN] [--verbose]

Example:
    $ python3 run.py --key abc123 --format json --dest app/i18n

    Running localeapp:default
    ✔ localeapp gem installed (v0.8.0)
    ✔ Key abc123 valid
    ✔ 2 locale(s) pulled from localeapp.com : (en-US.yml [12], fr-FR.yml [10])
    ✔ 2 locale(s) copied into app/i18n : (en_US.json, fr_FR.json)

    ✅ All targets completed.
"""

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT_DIR))

from localeapp_sync.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
