"""Tests for localization.templates module."""

from unittest.mock import MagicMock, patch

import pytest

from localization.templates import (
    POP_DIRECTIONAL_FORMATTING,
    RTL_EMBEDDING,
    MissingTranslationTemplate,
    compile_template,
    missing_message,
)


class TestCompileTemplate:
    """Tests for compile_template()."""

    def test_double_brace_variable(self):
        template = compile_template("Incident {{incident_id}} created")
        assert template({"incident_id": "INC-123"}) == "Incident INC-123 created"

    def test_single_brace_variable(self):
        assert compile_template("{count} items")({"count": 3}) == "3 items"

    def test_multiple_variables(self):
        template = compile_template("User {{user}} updated role {role}")
        assert template({"user": "alice", "role": "admin"}) == "User alice updated role admin"

    def test_variables_listed_once(self):
        template = compile_template("{{a}} {a} {b}")
        assert template.variables == ["a", "b"]

    def test_no_variables(self):
        assert compile_template("Simple message")() == "Simple message"

    def test_extra_variables_ignored(self):
        assert compile_template("Hi {{name}}")({"name": "Bo", "x": 1}) == "Hi Bo"

    @patch("localization.templates.logger")
    def test_missing_variable_raises(self, mock_logger):
        template = compile_template("Incident {{incident_id}} created")
        with pytest.raises(ValueError):
            template({"wrong_key": "value"})
        mock_logger.error.assert_called_once()

    def test_value_with_braces_not_reinterpolated(self):
        """Substituted values containing placeholders are inserted verbatim."""
        template = compile_template("Hello {{name}}")
        assert template({"name": "{user}"}) == "Hello {user}"

    def test_value_with_braces_not_substituted_twice(self):
        template = compile_template("{{a}} and {b}")
        assert template({"a": "{b}", "b": "B"}) == "{b} and B"

    def test_rtl_wraps_output(self):
        template = compile_template("مرحبا", rtl=True)
        assert template() == f"{RTL_EMBEDDING}مرحبا{POP_DIRECTIONAL_FORMATTING}"

    def test_keeps_source(self):
        template = compile_template("x", rtl=True)
        assert template.source == "x"
        assert template.rtl is True


class TestMissingTranslation:
    """Tests for the missing-translation stand-in."""

    @patch("localization.templates.logger")
    def test_missing_message(self, mock_logger):
        assert missing_message("fr", "common.save", None) == "Missing translation: common.save"
        mock_logger.warning.assert_called_once_with(
            "missing_translation", locale="fr", key="common.save"
        )

    def test_stand_in_renders_lazily(self):
        renderer = MagicMock(return_value="??")
        template = MissingTranslationTemplate("fr", "common.save", renderer)

        renderer.assert_not_called()
        assert template({"a": 1}) == "??"
        renderer.assert_called_once_with("fr", "common.save", {"a": 1})

    def test_stand_in_is_marked_missing(self):
        template = MissingTranslationTemplate("fr", "k")
        assert template.is_missing is True
        assert callable(template)
