"""Tests for template lookup and the Template object."""

import io
import logging
import os
from pathlib import Path

import pytest
from unittest.mock import patch

from fillin.config import FillInConfig
from fillin.exceptions import NoHookError, TemplateNotFoundError, TemplateReadError
from fillin.loader import TemplateLoader
from fillin.template import Template


@pytest.fixture
def template_dirs(tmp_path):
    """Two search directories; 'shared' exists in both."""
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()

    (first / "shared").write_text("from first [[$var]]")
    (second / "shared").write_text("from second")
    (second / "only_second").write_text("only in second")
    (second / "subdir").mkdir()

    return [str(first), str(second)]


class TestTemplateLoader:
    """Test TemplateLoader."""

    def test_first_directory_wins(self, template_dirs):
        loader = TemplateLoader(template_dirs)
        assert loader.load("shared") == "from first [[$var]]"

    def test_searches_later_directories(self, template_dirs):
        loader = TemplateLoader(template_dirs)
        assert loader.load("only_second") == "only in second"

    def test_directories_are_not_templates(self, template_dirs):
        loader = TemplateLoader(template_dirs)
        assert loader.find("subdir") is None

    def test_absolute_path_bypasses_search(self, template_dirs, tmp_path):
        elsewhere = tmp_path / "weird_place.txt"
        elsewhere.write_text("weird")

        loader = TemplateLoader(template_dirs)
        assert loader.load(str(elsewhere)) == "weird"

    def test_null_is_empty_template(self, template_dirs):
        assert TemplateLoader(template_dirs).load("null") == ""

    def test_not_found(self, template_dirs):
        loader = TemplateLoader(template_dirs)

        with pytest.raises(TemplateNotFoundError) as exc_info:
            loader.load("missing")

        assert exc_info.value.name == "missing"
        assert exc_info.value.search_path == template_dirs

    def test_unreadable(self, template_dirs):
        loader = TemplateLoader(template_dirs)

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(TemplateReadError, match="denied"):
                loader.load("shared")

    def test_default_search_path_is_cwd(self, tmp_path):
        (tmp_path / "here").write_text("local")
        original_cwd = os.getcwd()
        os.chdir(tmp_path)
        try:
            assert TemplateLoader().load("here") == "local"
        finally:
            os.chdir(original_cwd)


class TestTemplate:
    """Test the Template object."""

    def test_interpret(self, config):
        template = Template('some [[$var]] and so on', config)
        assert template.interpret() == 'some text and so on'

    def test_interpret_and_print(self, config):
        out = io.StringIO()
        Template('the text is [[ $[[$var2]][[$var]] ]]', config).interpret_and_print(out)
        assert out.getvalue() == 'the text is coconuts'

    def test_interpret_and_print_defaults_to_stdout(self, config, capsys):
        Template('hey, [[$var]]!', config).interpret_and_print()
        assert capsys.readouterr().out == 'hey, text!'

    def test_interpret_does_not_change_text(self, config):
        template = Template('[[$var]]', config)
        template.interpret()
        assert template.get_text() == '[[$var]]'

    def test_set_and_get_text(self, config):
        template = Template(config=config)
        assert template.get_text() is None
        assert template.interpret() == ''

        template.set_text('[[$more_var]]')
        assert template.get_text() == '[[$more_var]]'
        assert template.interpret() == 'donuts'

    def test_custom_hook(self, config):
        config.hooks.register('!', lambda text: text.upper())
        template = Template('some [[!mushrooms]] were in my shoes!', config)
        assert template.interpret() == 'some MUSHROOMS were in my shoes!'

    def test_unregistered_hook_aborts(self, config):
        with pytest.raises(NoHookError):
            Template('[[^x]]', config).interpret()

    def test_properties(self, config):
        template = Template('[[$var]]', config)
        assert template.get_property('color') is None

        template.set_property('color', 'blue')
        assert template.get_property('color') == 'blue'
        # Properties take no part in interpretation
        assert template.interpret() == 'text'

    def test_uses_shared_default_config(self):
        assert Template('x').config is Template('y').config

    def test_get_file(self, config, template_dirs):
        config.template_path = template_dirs
        template = Template(config=config)

        assert template.get_file('shared') is True
        assert template.interpret() == 'from first text'

    def test_get_file_null(self, config, template_dirs):
        config.template_path = template_dirs
        template = Template('old text', config)

        assert template.get_file('null') is True
        assert template.get_text() == ''

    def test_get_file_not_found_keeps_text(self, config, template_dirs, caplog):
        config.template_path = template_dirs
        template = Template('old text', config)

        with caplog.at_level(logging.WARNING):
            assert template.get_file('missing') is False

        assert template.get_text() == 'old text'
        assert "Can't find file 'missing'" in caplog.text

    def test_get_file_unreadable_empties_text(self, config, template_dirs, caplog):
        config.template_path = template_dirs
        template = Template('old text', config)

        with caplog.at_level(logging.WARNING):
            with patch("builtins.open", side_effect=PermissionError("denied")):
                assert template.get_file('shared') is False

        assert template.get_text() == ''
        assert "Can't open" in caplog.text
