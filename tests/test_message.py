"""Top-level entry points: result tuples vs raising variants, parsing, defaults."""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icumessage import (
    MessageOptions,
    format_message,
    format_message_or_raise,
    to_string,
    to_string_or_raise,
)
from icumessage.config import default_options, resolve_options
from icumessage.constants import LOCALE_ENV_VAR, MAX_DEPTH
from icumessage.diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    ErrorCategory,
    FormatConfigurationError,
    MessageArgumentError,
    MessageParseError,
)
from icumessage.enums import FormatType
from icumessage.message import parse_message
from icumessage.runtime import BabelBackend
from icumessage.syntax import (
    VALUE,
    NamedArgument,
    Plural,
    Select,
    SimpleFormat,
    Symbol,
    TextElement,
)
from tests.helpers.stubs import StubBackend, StubParser

GREETING = (TextElement("Hello, "), NamedArgument("name"), TextElement("!"))


def _options(parser: StubParser | None = None) -> MessageOptions:
    return MessageOptions(locale="en", backend=BabelBackend(), parser=parser)


# ============================================================================
# PARSING
# ============================================================================


class TestParseMessage:
    """Parser collaborator handling."""

    def test_nodes_returned_as_tuple(self) -> None:
        """Parsed nodes come back as a tuple."""
        parser = StubParser(nodes=GREETING)
        assert parse_message("Hello, {name}!", _options(parser)) == GREETING
        assert parser.seen == ["Hello, {name}!"]

    def test_remainder_is_parse_error(self) -> None:
        """Unconsumed input fails with the remainder attached."""
        parser = StubParser(nodes=(TextElement("a"),), remainder="{oops")
        with pytest.raises(MessageParseError) as exc_info:
            parse_message("a{oops", _options(parser))
        assert exc_info.value.remainder == "{oops"
        assert "'{oops'" in str(exc_info.value)
        assert exc_info.value.category is ErrorCategory.PARSE

    def test_parser_failure_wrapped(self) -> None:
        """ValueError from the parser becomes MessageParseError."""
        parser = StubParser(error=ValueError("unbalanced brace"))
        with pytest.raises(MessageParseError) as exc_info:
            parse_message("{", _options(parser))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PARSE_FAILED
        assert exc_info.value.remainder == ""

    def test_no_parser_configured(self) -> None:
        """Raw text without a parser is a configuration error."""
        with pytest.raises(FormatConfigurationError) as exc_info:
            parse_message("Hello", _options())
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PARSER_NOT_CONFIGURED


# ============================================================================
# RESULT-RETURNING ENTRY POINTS
# ============================================================================


class TestToString:
    """to_string returns (text, errors)."""

    def test_success(self) -> None:
        """Pre-parsed nodes render."""
        assert to_string(GREETING, {"name": "Ana"}, _options()) == ("Hello, Ana!", ())

    def test_raw_text_success(self) -> None:
        """Raw text goes through the parser."""
        options = _options(StubParser(nodes=GREETING))
        assert to_string("Hello, {name}!", {"name": "Bo"}, options) == ("Hello, Bo!", ())

    def test_failure_returns_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Errors are returned, not raised, and logged as warnings."""
        with caplog.at_level(logging.WARNING, logger="icumessage.message"):
            result, errors = to_string(GREETING, {}, _options())
        assert result is None
        assert len(errors) == 1
        assert isinstance(errors[0], MessageArgumentError)
        assert "Failed to format message" in caplog.text

    def test_parse_failure_returns_error(self) -> None:
        """Parse errors also come back in the tuple."""
        options = _options(StubParser(remainder="}"))
        result, errors = to_string("}", {}, options)
        assert result is None
        assert isinstance(errors[0], MessageParseError)

    def test_single_node(self) -> None:
        """A lone node is accepted."""
        assert to_string(TextElement("x"), {}, _options()) == ("x", ())


class TestFormatMessage:
    """format_message: tuple for raw text, list for pre-parsed input."""

    def test_raw_text_returns_tuple(self) -> None:
        """Raw text returns (fragments, errors)."""
        options = _options(StubParser(nodes=GREETING))
        assert format_message("ignored", {"name": "Ana"}, options) == (
            ["Hello, ", "Ana", "!"],
            (),
        )

    def test_raw_text_failure_returns_tuple(self) -> None:
        """Raw text failure returns (None, (error,))."""
        fragments, errors = format_message("x", {}, _options())
        assert fragments is None
        assert isinstance(errors[0], FormatConfigurationError)

    def test_pre_parsed_returns_list(self) -> None:
        """Pre-parsed input returns the list itself."""
        assert format_message(GREETING, {"name": "Ana"}, _options()) == ["Hello, ", "Ana", "!"]

    def test_pre_parsed_failure_raises(self) -> None:
        """Pre-parsed input raises on failure."""
        with pytest.raises(MessageArgumentError):
            format_message(GREETING, {}, _options())


# ============================================================================
# RAISING ENTRY POINTS
# ============================================================================


class TestRaisingEntryPoints:
    """to_string_or_raise / format_message_or_raise."""

    def test_to_string_or_raise(self) -> None:
        """Successful call returns the string."""
        assert to_string_or_raise(GREETING, {"name": "Ana"}, _options()) == "Hello, Ana!"

    def test_to_string_or_raise_raises(self) -> None:
        """Failures propagate."""
        with pytest.raises(MessageArgumentError):
            to_string_or_raise(GREETING, ["Ana"], _options())

    def test_format_message_or_raise_raw(self) -> None:
        """Raw text returns fragments directly."""
        options = _options(StubParser(nodes=GREETING))
        assert format_message_or_raise("x", {"name": "A"}, options) == ["Hello, ", "A", "!"]

    def test_format_message_or_raise_parse_error(self) -> None:
        """Parse errors propagate."""
        options = _options(StubParser(remainder="{"))
        with pytest.raises(MessageParseError):
            format_message_or_raise("{", {}, options)


# ============================================================================
# NORMALIZATION AT THE ENTRY POINT
# ============================================================================


class TestWhitespaceNormalization:
    """Whitespace before nested blocks is dropped once per call."""

    def _message(self) -> tuple[Select, ...]:
        inner = Plural(NamedArgument("n"), {"other": (VALUE, TextElement(" items"))})
        return (Select(NamedArgument("g"), {"other": (TextElement("\n    "), inner)}),)

    def test_pre_parsed_normalized(self) -> None:
        """Pre-parsed trees are normalized."""
        assert to_string_or_raise(self._message(), {"g": "x", "n": 3}, _options()) == "3 items"

    def test_raw_text_normalized(self) -> None:
        """Parsed trees are normalized."""
        options = _options(StubParser(nodes=self._message()))
        assert to_string_or_raise("x", {"g": "x", "n": 3}, options) == "3 items"

    def test_significant_whitespace_kept(self) -> None:
        """Whitespace before plain text is content."""
        nodes = (Select(NamedArgument("g"), {"other": (TextElement("  "), TextElement("a"))}),)
        assert to_string_or_raise(nodes, {"g": "x"}, _options()) == "  a"


# ============================================================================
# OPTIONS AND DEFAULTS
# ============================================================================


class TestOptionsResolution:
    """Mapping and default options."""

    def test_mapping_overrides_defaults(self) -> None:
        """A mapping is applied on top of the defaults."""
        options = resolve_options({"locale": "de", "currency": "EUR"})
        assert options.locale == "de"
        assert options.extra["currency"] == "EUR"

    def test_options_instance_used_as_is(self) -> None:
        """A MessageOptions passes straight through."""
        options = _options()
        assert resolve_options(options) is options

    def test_env_locale_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """ICUMESSAGE_LOCALE selects the default locale."""
        monkeypatch.setenv(LOCALE_ENV_VAR, "de-DE")
        assert default_options().locale == "de_DE"
        node = SimpleFormat(NamedArgument("n"), FormatType.NUMBER)
        assert to_string_or_raise((node,), {"n": 1234.5}) == "1.234,5"

    def test_mapping_options_in_entry_point(self) -> None:
        """Entry points accept plain dicts."""
        node = SimpleFormat(NamedArgument("n"), FormatType.NUMBER)
        assert to_string_or_raise((node,), {"n": 1234.5}, {"locale": "en"}) == "1,234.5"

    def test_custom_backend_via_mapping(self) -> None:
        """The backend itself can be swapped through a mapping."""
        backend = StubBackend()
        node = SimpleFormat(NamedArgument("n"), FormatType.DATE)
        assert to_string_or_raise((node,), {"n": 1}, {"backend": backend}) == "<date:None:1>"

    @given(st.text(max_size=30))
    def test_string_arguments_verbatim(self, name: str) -> None:
        """String arguments are inserted without formatting."""
        event(f"empty={not name}")
        result = to_string_or_raise(GREETING, {"name": name}, _options())
        assert result == f"Hello, {name}!"


# ============================================================================
# FAILURES SURFACED BY THE RESULT FORM
# ============================================================================


def _deeply_nested(depth: int) -> Select:
    node: Select | TextElement = TextElement("leaf")
    for _ in range(depth):
        node = Select(NamedArgument("g"), {"other": (node,)})
    assert isinstance(node, Select)
    return node


class TestResultFormFailures:
    """Failures that must come back in the error tuple."""

    def test_deep_nesting_returned_as_error(self) -> None:
        """A tree far past the nesting limit does not escape as RecursionError."""
        result, errors = to_string((_deeply_nested(3000),), {"g": "a"}, {"locale": "en"})
        assert result is None
        assert len(errors) == 1
        assert isinstance(errors[0], DepthLimitExceededError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.DEPTH_LIMIT_EXCEEDED

    def test_deep_nesting_raw_text_returned_as_error(self) -> None:
        """Parsed trees are limited the same way."""
        options = _options(StubParser(nodes=(_deeply_nested(3000),)))
        fragments, errors = format_message("deep", {"g": "a"}, options)
        assert fragments is None
        assert isinstance(errors[0], DepthLimitExceededError)

    def test_nesting_at_limit_renders(self) -> None:
        """Trees up to the limit still render."""
        message = (_deeply_nested(MAX_DEPTH),)
        assert to_string(message, {"g": "a"}, {"locale": "en"}) == ("leaf", ())

    def test_value_wrapped_in_number_format(self) -> None:
        """{value, number, percent} with the Babel backend is a configuration error."""
        node = Plural(
            NamedArgument("n"),
            {"other": (SimpleFormat(VALUE, FormatType.NUMBER, Symbol("percent")),)},
        )
        result, errors = to_string((node,), {"n": 1200}, _options())
        assert result is None
        assert isinstance(errors[0], FormatConfigurationError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.VALUE_NOT_FORMATTABLE

    def test_caller_cannot_supply_value_text(self, caplog: pytest.LogCaptureFixture) -> None:
        """An 'arg' option does not make a top-level value renderable."""
        with caplog.at_level(logging.WARNING, logger="icumessage.runtime.options"):
            result, errors = to_string((VALUE,), {}, {"locale": "en", "arg": "LEAK"})
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.VALUE_OUTSIDE_PLURAL
        assert "arg" in caplog.text
