"""Fetching of locale files with the localeapp gem."""
