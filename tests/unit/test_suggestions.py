"""Unit tests for suggestion catalogues and configuration overrides."""

import pytest

from cvwizard.contexts.authoring.suggestions import (
    get_suggestion,
    get_suggestions,
    language_key,
    parse_language_suggestion,
)
from cvwizard.utils.config import clear_settings_cache, load_settings


@pytest.mark.unit
class TestCatalogues:
    def test_catalogue_sizes(self):
        assert len(get_suggestions("summary")) == 3
        assert len(get_suggestions("skills")) == 10
        assert len(get_suggestions("languages")) == 7
        assert len(get_suggestions("hobbies")) == 12

    def test_returns_copy(self):
        skills = get_suggestions("skills")
        skills.clear()
        assert get_suggestions("skills")

    def test_unknown_catalogue(self):
        with pytest.raises(KeyError):
            get_suggestions("awards")

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            get_suggestion("summary", 3)


@pytest.mark.unit
class TestLanguageSuggestions:
    @pytest.mark.parametrize(
        "suggestion, language",
        [
            ("English (native)", "English"),
            ("Chinese – Mandarin (conversational)", "Chinese"),
            ("Dutch", "Dutch"),
        ],
    )
    def test_parse(self, suggestion, language):
        assert parse_language_suggestion(suggestion) == (language, "Fluent")

    def test_language_key(self):
        assert language_key("  English (UK) ") == "english"
        assert language_key("") == ""


@pytest.mark.unit
class TestSettingsOverrides:
    def test_override_file(self, tmp_path, monkeypatch):
        override = tmp_path / "override.yaml"
        override.write_text("suggestions:\n  skills:\n    - Rust\n", encoding="utf-8")
        monkeypatch.setenv("CVWIZARD_CONFIG_PATH", str(override))
        clear_settings_cache()

        assert get_suggestions("skills") == ["Rust"]
        assert len(get_suggestions("hobbies")) == 12

    def test_missing_override_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")
