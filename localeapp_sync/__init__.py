"""
Localeapp Sync

Pulls translation files from localeapp.com through the ``localeapp`` command
line tool and publishes them into a project's locale directory as YAML, JSON
or JavaScript files.

Usage:
    from localeapp_sync import run_task, TaskConfig, OutputFormat

    config = TaskConfig(name="dist", key="abc123",
                        output_format=OutputFormat.JSON, dest=Path("i18n"))
    run_task(config)
"""

from localeapp_sync.core import run_targets, run_task
from localeapp_sync.errors import LocaleappError
from localeapp_sync.models import LocaleBatch, Metadata, OutputFormat, TaskConfig

__version__ = "1.0.0"

__all__ = [
    "LocaleBatch",
    "LocaleappError",
    "Metadata",
    "OutputFormat",
    "TaskConfig",
    "run_targets",
    "run_task",
]
