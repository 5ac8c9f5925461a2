"""
Tests for run settings and render configuration.
"""

from pathlib import Path

import pytest

from autodoc.config import RenderConfig, Settings, split_columns
from autodoc.constants import DEFAULT_INPUT_COLUMNS, DEFAULT_OUTPUT_COLUMNS
from autodoc.exceptions import ConfigError


@pytest.mark.unit
class TestSplitColumns:
    """Tests for split_columns()."""

    def test_comma_separated(self):
        assert split_columns("Input, Type,,Description ") == (
            "Input",
            "Type",
            "Description",
        )

    def test_sequence_of_mixed_entries(self):
        assert split_columns(["Input,Type", "Default"]) == ("Input", "Type", "Default")

    def test_none(self):
        assert split_columns(None) == ()


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.action == Path("action.yml")
        assert settings.output == Path("README.md")
        assert settings.col_max_width == "1000"
        assert settings.col_max_words == "6"
        assert settings.input_columns == DEFAULT_INPUT_COLUMNS
        assert settings.output_columns == DEFAULT_OUTPUT_COLUMNS
        assert settings.log_level == "warning"

    def test_from_env(self):
        settings = Settings.from_env(
            {
                "AUTODOC_ACTION": "sub/action.yaml",
                "AUTODOC_COL_MAX_WIDTH": "50",
                "AUTODOC_INPUT_COLUMNS": "Input, Description",
                "AUTODOC_LOG_LEVEL": "debug",
                "AUTODOC_UNKNOWN": "ignored",
                "HOME": "/root",
            }
        )
        assert settings.action == Path("sub/action.yaml")
        assert settings.col_max_width == "50"
        assert settings.input_columns == ("Input", "Description")
        assert settings.log_level == "debug"
        assert settings.output == Path("README.md")

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("AUTODOC_OUTPUT", "docs/README.md")
        assert Settings.from_env().output == Path("docs/README.md")

    def test_merge_skips_none(self):
        settings = Settings().merge(action=None, output="doc.md", col_max_words=None)
        assert settings.action == Path("action.yml")
        assert settings.output == Path("doc.md")
        assert settings.col_max_words == "6"

    def test_merge_cli_over_env(self):
        settings = Settings.from_env({"AUTODOC_COL_MAX_WORDS": "3"}).merge(
            col_max_words="9"
        )
        assert settings.col_max_words == "9"

    def test_merge_empty_column_list_keeps_current(self):
        settings = Settings().merge(input_columns=[], output_columns=" , ")
        assert settings.input_columns == DEFAULT_INPUT_COLUMNS
        assert settings.output_columns == DEFAULT_OUTPUT_COLUMNS

    def test_merge_returns_copy(self):
        settings = Settings()
        settings.merge(output="other.md")
        assert settings.output == Path("README.md")


@pytest.mark.unit
class TestRenderConfig:
    """Tests for Settings.render_config()."""

    def test_parses_integers(self):
        config = Settings().merge(col_max_width="40", col_max_words="0").render_config()
        assert config == RenderConfig(max_width=40, max_words=0)

    def test_columns_carried_over(self):
        config = Settings().merge(output_columns="Output").render_config()
        assert config.output_columns == ("Output",)
        assert config.input_columns == DEFAULT_INPUT_COLUMNS

    @pytest.mark.parametrize("value", ["abc", "1.5", "", "10px"])
    def test_invalid_width(self, value):
        with pytest.raises(ConfigError, match="colMaxWidth"):
            Settings().merge(col_max_width=value).render_config()

    def test_invalid_words(self):
        with pytest.raises(ConfigError, match="colMaxWords"):
            Settings().merge(col_max_words="six").render_config()
