"""Helpers for the Localeapp Sync pipeline steps."""
