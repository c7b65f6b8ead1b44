"""Tests for span parsing and hook dispatch."""

import pytest
from unittest.mock import Mock

from fillin.engine.resolver import SpanResolver
from fillin.exceptions import MalformedSpanError, NoHookError
from fillin.hooks.registry import HookRegistry


class TestSpanResolver:
    """Test SpanResolver."""

    def setup_method(self):
        self.hooks = HookRegistry(variables={'var': 'text'})
        self.resolver = SpanResolver('[[', ']]', self.hooks)

    @pytest.mark.parametrize("span", [
        "[[$var]]",
        "[[ $var ]]",
        "[[\t$  var\n]]",
    ])
    def test_whitespace_insensitive(self, span):
        assert self.resolver.parse(span) == ('$', 'var')
        assert self.resolver.resolve(span) == 'text'

    def test_payload_keeps_escape_markers(self):
        assert self.resolver.parse(r"[[ $text\]] ]]") == ('$', r'text\]]')

    def test_payload_spans_lines(self):
        assert self.resolver.parse("[[!line one\nline two]]") == ('!', 'line one\nline two')

    @pytest.mark.parametrize("span", [
        "[[var]]",
        "[[_var]]",
        "x[[$var]]",
        "[[$var]]x",
        "[[   ]]",
    ])
    def test_malformed_span(self, span):
        with pytest.raises(MalformedSpanError) as exc_info:
            self.resolver.resolve(span)
        assert exc_info.value.span == span

    def test_unregistered_tag(self):
        with pytest.raises(NoHookError) as exc_info:
            self.resolver.resolve("[[%var]]")
        assert exc_info.value.tag == '%'

    def test_custom_hook_receives_trimmed_payload(self):
        hook = Mock(return_value="LOUD")
        self.hooks.register('!', hook)

        assert self.resolver.resolve("[[ !  mushrooms  ]]") == "LOUD"
        hook.assert_called_once_with("mushrooms")

    def test_hook_failure_propagates(self):
        self.hooks.register('!', Mock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            self.resolver.resolve("[[!x]]")

    def test_delimiters_matched_literally(self):
        resolver = SpanResolver('(*', '*)', self.hooks)
        assert resolver.resolve("(* $var *)") == 'text'
