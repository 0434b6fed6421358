"""Tests for token scanning and the strict/lenient failure policy."""

import re
import pytest
from unittest.mock import Mock
from nanotpl.lib.errors import UnresolvedVariableError
from nanotpl.lib.parser.base import TokenParser, delimiter_escape, pattern_compile
from nanotpl.models.dataModel import EngineConfig, ResolveResult


@pytest.fixture
def mock_resolver():
    resolver = Mock()
    resolver.resolve = Mock()
    return resolver


@pytest.fixture
def parser(mock_resolver):
    return TokenParser(pattern_compile(EngineConfig()), mock_resolver, warn=True)


@pytest.fixture
def lenient_parser(mock_resolver):
    return TokenParser(pattern_compile(EngineConfig()), mock_resolver, warn=False)


@pytest.mark.parametrize(
    "delimiter", ["$(", ")", "[", "]", "|", "${{", "}}", "@#[", "\\", ".*+?^"]
)
def test_delimiter_escape_matches_only_literal_text(delimiter):
    escaped = delimiter_escape(delimiter)
    assert re.fullmatch(escaped, delimiter)
    assert not re.fullmatch(escaped, "x" * len(delimiter))


def test_pattern_compile_captures_token_body():
    pattern = pattern_compile(EngineConfig(start="$(", end=")"))
    found = pattern.search("Hello $( user.name )!")
    assert found.group(0) == "$( user.name )"
    assert found.group(1) == "user.name"


def test_pattern_compile_is_case_insensitive():
    pattern = pattern_compile(EngineConfig())
    assert pattern.search("${NAME}").group(1) == "NAME"


def test_pattern_requires_token_body():
    pattern = pattern_compile(EngineConfig())
    assert pattern.search("${}") is None
    assert pattern.search("${   }") is None


def test_tokens_find(parser):
    tokens = parser.tokens_find("${a} and ${ b.c } but not #{d}")
    assert [t.token for t in tokens] == ["a", "b.c"]
    assert [t.tag for t in tokens] == ["${a}", "${ b.c }"]
    assert tokens[0].start == 0
    assert tokens[0].end == 4


def test_basic_substitution(parser, mock_resolver):
    mock_resolver.resolve.return_value = ResolveResult(text="value")
    result = parser.parse("Hello ${var}", {})
    assert mock_resolver.resolve.call_count == 1
    match, context = mock_resolver.resolve.call_args.args
    assert match.token == "var"
    assert context == {}
    assert result == "Hello value"


def test_multiple_substitutions(parser, mock_resolver):
    mock_resolver.resolve.side_effect = [
        ResolveResult(text="first"),
        ResolveResult(text="second"),
    ]
    assert parser.parse("${var1} and ${var2}", {}) == "first and second"


def test_substitution_is_not_rescanned(parser, mock_resolver):
    mock_resolver.resolve.return_value = ResolveResult(text="${again}")
    assert parser.parse("${var}", {}) == "${again}"
    assert mock_resolver.resolve.call_count == 1


def test_empty_template_skips_resolver(parser, mock_resolver):
    assert parser.parse("", {"x": 1}) == ""
    mock_resolver.resolve.assert_not_called()


def test_resolver_error_raises_in_strict_mode(parser, mock_resolver):
    error = UnresolvedVariableError("var", "${var}")
    mock_resolver.resolve.return_value = ResolveResult(
        text="", error=error, success=False
    )
    with pytest.raises(UnresolvedVariableError) as excinfo:
        parser.parse("before ${var} after", {})
    assert excinfo.value is error


def test_resolver_error_passes_tag_through_in_lenient_mode(
    lenient_parser, mock_resolver
):
    mock_resolver.resolve.side_effect = [
        ResolveResult(
            text="",
            error=UnresolvedVariableError("var", "${ var }"),
            success=False,
        ),
        ResolveResult(text="ok"),
    ]
    assert lenient_parser.parse("${ var } ${found}", {}) == "${ var } ok"
