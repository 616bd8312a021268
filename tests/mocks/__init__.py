"""
Mock implementations for external services

Provides a stand-in for the localeapp command line gem so the pipeline can
be tested without Ruby, network access or a real project key.
"""

from .localeapp_mock import MockLocaleappCLI

__all__ = ["MockLocaleappCLI"]
