"""Tests for rewriting pulled YAML files into the output formats."""

import json
import re

import pytest
import yaml

from localeapp_sync.errors import LocaleDocumentError, LocaleappFilesystemError
from localeapp_sync.models import LocaleBatch
from localeapp_sync.utils.format_locales import (
    format_structured,
    format_yml,
    load_locale_document,
    locale_code,
    normalize_locale,
)
from tests.fixtures import EN_US, FR_FR, POLLED_AT, SAMPLE_LOCALES, UPDATED_AT

VERSION = "localeapp version 0.8.0"


@pytest.fixture
def locales_dir(tmp_path):
    path = tmp_path / "config" / "locales"
    path.mkdir(parents=True)
    for locale, translations in SAMPLE_LOCALES.items():
        (path / f"{locale}.yml").write_text(
            yaml.safe_dump({locale: translations}, allow_unicode=True), encoding="utf-8"
        )
    return path


@pytest.fixture
def batch():
    return LocaleBatch(
        polled_at=POLLED_AT,
        updated_at=UPDATED_AT,
        files=["en-US.yml", "fr-FR.yml"],
        tool_version=VERSION,
    )


def listing(path):
    return sorted(entry.name for entry in path.iterdir())


class TestLocaleNames:
    def test_locale_code(self):
        assert locale_code("en-US.yml") == "en-US"

    def test_locale_code_rejects_other_files(self):
        with pytest.raises(LocaleDocumentError):
            locale_code("en-US.json")

    @pytest.mark.parametrize(
        "locale, expected",
        [("en-US", "en_US"), ("fr", "fr"), ("zh-Hant-TW", "zh_Hant-TW")],
    )
    def test_only_first_hyphen_is_replaced(self, locale, expected):
        assert normalize_locale(locale) == expected


class TestLoadLocaleDocument:
    def test_unwraps_locale_key(self, locales_dir):
        assert load_locale_document(locales_dir / "fr-FR.yml", "fr-FR") == FR_FR

    def test_wrong_root_key(self, tmp_path):
        path = tmp_path / "en-US.yml"
        path.write_text(yaml.safe_dump({"en-GB": {"a": "b"}}))
        with pytest.raises(LocaleDocumentError, match="no root key 'en-US'"):
            load_locale_document(path, "en-US")

    def test_empty_locale_body(self, tmp_path):
        path = tmp_path / "en-US.yml"
        path.write_text("en-US:\n")
        assert load_locale_document(path, "en-US") == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(LocaleappFilesystemError):
            load_locale_document(tmp_path / "en-US.yml", "en-US")


class TestFormatJson:
    def test_outputs_replace_yaml_files(self, batch, locales_dir, utc):
        written = format_structured(batch, locales_dir, to_js=False, tz=utc)
        assert [path.name for path in written] == ["en_US.json", "fr_FR.json"]
        assert listing(locales_dir) == ["en_US.json", "fr_FR.json"]

    def test_content_has_meta_and_no_locale_key(self, batch, locales_dir, utc):
        format_structured(batch, locales_dir, to_js=False, tz=utc)
        content = json.loads((locales_dir / "en_US.json").read_text(encoding="utf-8"))

        assert "en-US" not in content
        assert content["user"] == EN_US["user"]
        assert content["welcome"] == "Welcome"
        assert content["_meta"] == {
            "polledAt": "Tue Jul 01 2014 10:00:00 GMT+0000",
            "updatedAt": "Tue Jul 01 2014 09:00:00 GMT+0000",
            "gem": VERSION,
        }

    def test_two_space_indent(self, batch, locales_dir, utc):
        format_structured(batch, locales_dir, tz=utc)
        lines = (locales_dir / "fr_FR.json").read_text(encoding="utf-8").splitlines()
        assert lines[0] == "{"
        assert lines[1].startswith('  "')

    def test_non_ascii_kept(self, tmp_path, utc):
        locales_dir = tmp_path / "locales"
        locales_dir.mkdir()
        (locales_dir / "de-DE.yml").write_text(
            yaml.safe_dump({"de-DE": {"close": "Schließen"}}, allow_unicode=True), encoding="utf-8"
        )
        batch = LocaleBatch(POLLED_AT, UPDATED_AT, ["de-DE.yml"], VERSION)
        format_structured(batch, locales_dir, tz=utc)
        assert "Schließen" in (locales_dir / "de_DE.json").read_text(encoding="utf-8")

    def test_document_without_locale_key_aborts(self, tmp_path, utc):
        locales_dir = tmp_path / "locales"
        locales_dir.mkdir()
        (locales_dir / "en-US.yml").write_text(yaml.safe_dump({"user": {"name": "Name"}}))
        batch = LocaleBatch(POLLED_AT, UPDATED_AT, ["en-US.yml"], VERSION)
        with pytest.raises(LocaleDocumentError):
            format_structured(batch, locales_dir, tz=utc)


class TestFormatJs:
    def test_assignment_wraps_json(self, batch, locales_dir, utc):
        format_structured(batch, locales_dir, to_js=True, tz=utc)
        assert listing(locales_dir) == ["en_US.js", "fr_FR.js"]

        content = (locales_dir / "en_US.js").read_text(encoding="utf-8")
        match = re.match(r"^var translate_en_US\s*=\s*(\{.*\});$", content, re.DOTALL)
        assert match is not None

        payload = json.loads(match.group(1))
        assert payload["user"]["name"] == "Name"
        assert payload["_meta"]["gem"] == VERSION


class TestFormatYml:
    def test_renames_without_touching_content(self, batch, locales_dir):
        before = (locales_dir / "en-US.yml").read_text(encoding="utf-8")
        renamed = format_yml(batch, locales_dir)

        assert [path.name for path in renamed] == ["en_US.yml", "fr_FR.yml"]
        assert listing(locales_dir) == ["en_US.yml", "fr_FR.yml"]
        assert (locales_dir / "en_US.yml").read_text(encoding="utf-8") == before

    def test_locale_without_hyphen(self, tmp_path):
        locales_dir = tmp_path / "locales"
        locales_dir.mkdir()
        (locales_dir / "fr.yml").write_text("fr:\n  a: b\n")
        batch = LocaleBatch(POLLED_AT, UPDATED_AT, ["fr.yml"], VERSION)
        format_yml(batch, locales_dir)
        assert listing(locales_dir) == ["fr.yml"]

    def test_missing_file_aborts(self, batch, tmp_path):
        empty_dir = tmp_path / "empty"
        empty_dir.mkdir()
        with pytest.raises(LocaleappFilesystemError, match="Unable to rename"):
            format_yml(batch, empty_dir)

    def test_existing_target_is_not_overwritten(self, tmp_path):
        locales_dir = tmp_path / "locales"
        locales_dir.mkdir()
        (locales_dir / "en-US.yml").write_text("en-US:\n  a: hyphen\n")
        (locales_dir / "en_US.yml").write_text("en_US:\n  a: underscore\n")
        batch = LocaleBatch(POLLED_AT, UPDATED_AT, ["en-US.yml", "en_US.yml"], VERSION)

        with pytest.raises(LocaleappFilesystemError, match="en_US.yml already exists"):
            format_yml(batch, locales_dir)
        assert (locales_dir / "en_US.yml").read_text() == "en_US:\n  a: underscore\n"
        assert (locales_dir / "en-US.yml").exists()
