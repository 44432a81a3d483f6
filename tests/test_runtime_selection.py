"""Branch selection: maybe-integer coercion, exact vs category precedence, offsets."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icumessage.diagnostics import (
    DiagnosticCode,
    MessageArgumentError,
    MessageLookupError,
)
from icumessage.enums import PluralType
from icumessage.runtime import (
    MessageOptions,
    choose_plural_branch,
    choose_select_branch,
    plural_branch,
    select_branch,
    to_maybe_integer,
)
from icumessage.syntax import NamedArgument, Plural, Select, SelectOrdinal, TextElement
from tests.helpers.stubs import StubBackend

A = (TextElement("A"),)
B = (TextElement("B"),)
C = (TextElement("C"),)


# ============================================================================
# MAYBE-INTEGER COERCION
# ============================================================================


class TestToMaybeInteger:
    """Numeric selector coercion."""

    def test_int_passes_through(self) -> None:
        """Integers are unchanged."""
        assert to_maybe_integer(7) == 7

    @pytest.mark.parametrize(("value", "expected"), [(2.9, 2), (-2.9, -2), (0.5, 0)])
    def test_float_truncates_toward_zero(self, value: float, expected: int) -> None:
        """Floats truncate, never round."""
        assert to_maybe_integer(value) == expected

    def test_decimal_integer_part(self) -> None:
        """Decimals keep their integer part."""
        assert to_maybe_integer(Decimal("-7.75")) == -7

    def test_string_passes_through(self) -> None:
        """Non-numeric values are opaque keys."""
        assert to_maybe_integer("female") == "female"

    def test_bool_passes_through(self) -> None:
        """Booleans are not numbers here."""
        assert to_maybe_integer(True) is True

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("NaN")])
    def test_non_finite_rejected(self, value: float | Decimal) -> None:
        """NaN and infinity have no integer part."""
        with pytest.raises(MessageArgumentError) as exc_info:
            to_maybe_integer(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NON_FINITE_NUMBER

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_float_matches_int(self, value: float) -> None:
        """Coercion agrees with int() for finite floats."""
        event(f"negative={value < 0}")
        assert to_maybe_integer(value) == int(value)


# ============================================================================
# SELECT
# ============================================================================


class TestSelectBranch:
    """Exact key, else other."""

    def test_exact_key(self) -> None:
        """A matching key wins."""
        assert choose_select_branch({"female": A, "other": C}, "female") == A

    def test_falls_back_to_other(self) -> None:
        """Unmatched key uses other."""
        assert choose_select_branch({"female": A, "other": C}, "male") == C

    def test_integer_matches_int_and_string_keys(self) -> None:
        """1 matches both {1: ...} and {"1": ...}."""
        assert choose_select_branch({1: A, "other": C}, 1) == A
        assert choose_select_branch({"1": B, "other": C}, 1) == B

    def test_int_key_preferred_over_string_key(self) -> None:
        """When both exist, the int key is tried first."""
        assert choose_select_branch({1: A, "1": B, "other": C}, 1) == A

    def test_bool_matches_true_false_keys_only(self) -> None:
        """True never matches the integer key 1."""
        assert choose_select_branch({"true": A, "other": C}, True) == A
        assert choose_select_branch({1: A, "other": C}, True) == C

    def test_unhashable_selector_uses_other(self) -> None:
        """Lists cannot match any key."""
        assert choose_select_branch({"other": C}, ["x"]) == C

    def test_missing_other_raises(self) -> None:
        """No match and no other is a lookup error."""
        with pytest.raises(MessageLookupError, match="'male'"):
            choose_select_branch({"female": A}, "male")

    def test_missing_other_tolerated_when_key_matches(self) -> None:
        """Other is validated lazily."""
        assert choose_select_branch({"female": A}, "female") == A

    def test_select_node_coerces_float(self) -> None:
        """Select node coerces its argument before lookup."""
        node = Select(NamedArgument("n"), {"3": A, "other": C})
        assert select_branch(node, 3.7) == A

    @given(st.text().filter(lambda s: s != "x"))
    def test_other_for_any_unmatched_value(self, value: str) -> None:
        """Any value that matches no explicit key renders other."""
        assert choose_select_branch({"x": A, "other": C}, value) == C


# ============================================================================
# PLURAL PRECEDENCE
# ============================================================================


class TestPluralPrecedence:
    """Exact key, then category, then other."""

    BRANCHES = {"1": A, "one": B, "other": C}

    def test_exact_beats_category(self) -> None:
        """Value 1 (category one) picks the exact branch."""
        assert choose_plural_branch(self.BRANCHES, 1, "one") == A

    def test_category_when_no_exact_key(self) -> None:
        """Value 2 in a locale where 2 is 'one' picks the category branch."""
        assert choose_plural_branch(self.BRANCHES, 2, "one") == B

    def test_other_when_nothing_matches(self) -> None:
        """Unlisted category falls back to other."""
        assert choose_plural_branch(self.BRANCHES, 5, "many") == C

    def test_missing_other_raises(self) -> None:
        """No exact, no category, no other."""
        with pytest.raises(MessageLookupError):
            choose_plural_branch({"one": B}, 5, "many")

    @given(st.integers(min_value=2, max_value=10_000))
    def test_non_one_values_pick_other(self, n: int) -> None:
        """Without a category match every value lands on other."""
        assert choose_plural_branch(self.BRANCHES, n, "other") == C


# ============================================================================
# PLURAL NODES
# ============================================================================


class TestPluralBranch:
    """plural_branch end to end with a stub backend."""

    def test_offset_applied_to_category_and_value(self, stub_backend: StubBackend) -> None:
        """Offset 1 with n=3: category and value use 2, exact key uses 3."""
        options = MessageOptions(locale="xx", backend=stub_backend)
        node = Plural(NamedArgument("n"), {2: A, "other": C}, offset=1)

        branch, branch_options = plural_branch(node, 3, options)

        assert branch == C
        assert branch_options.arg == "2"
        assert branch_options.plural_type is PluralType.CARDINAL
        plural_call = stub_backend.calls[-1]
        assert plural_call.kind == "plural:cardinal"
        assert plural_call.value == 2

    def test_exact_key_uses_pre_offset_value(self, stub_backend: StubBackend) -> None:
        """{=3} matches n=3 even with offset 1."""
        options = MessageOptions(locale="xx", backend=stub_backend)
        node = Plural(NamedArgument("n"), {3: A, 2: B, "other": C}, offset=1)

        branch, _ = plural_branch(node, 3, options)

        assert branch == A

    def test_category_from_offset_value(self) -> None:
        """Offset 1 with n=2: category of 1 is 'one'."""
        backend = StubBackend()
        options = MessageOptions(locale="xx", backend=backend)
        node = Plural(NamedArgument("n"), {"one": B, "other": C}, offset=1)

        branch, branch_options = plural_branch(node, 2, options)

        assert branch == B
        assert branch_options.arg == "1"

    def test_custom_category_table(self) -> None:
        """Locale where 2 is 'one'."""
        backend = StubBackend(cardinal=lambda n: "one" if n in (1, 2) else "other")
        options = MessageOptions(locale="xx", backend=backend)
        node = Plural(NamedArgument("n"), {"1": A, "one": B, "other": C})

        assert plural_branch(node, 1, options)[0] == A
        assert plural_branch(node, 2, options)[0] == B
        assert plural_branch(node, 3, options)[0] == C

    def test_ordinal_mode(self, stub_backend: StubBackend) -> None:
        """SelectOrdinal asks for ordinal categories with offset 0."""
        options = MessageOptions(locale="xx", backend=stub_backend)
        node = SelectOrdinal(NamedArgument("n"), {"two": B, "other": C})

        branch, branch_options = plural_branch(node, 22, options)

        assert branch == B
        assert branch_options.plural_type is PluralType.ORDINAL
        assert branch_options.arg == "22"

    def test_float_argument_truncated(self, stub_backend: StubBackend) -> None:
        """1.9 is treated as 1."""
        options = MessageOptions(locale="xx", backend=stub_backend)
        node = Plural(NamedArgument("n"), {"one": B, "other": C})

        branch, branch_options = plural_branch(node, 1.9, options)

        assert branch == B
        assert branch_options.arg == "1"

    @pytest.mark.parametrize("value", ["three", True, None])
    def test_non_numeric_rejected(self, value: object, stub_options: MessageOptions) -> None:
        """Plural requires a number."""
        node = Plural(NamedArgument("n"), {"other": C})
        with pytest.raises(MessageArgumentError) as exc_info:
            plural_branch(node, value, stub_options)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PLURAL_ARGUMENT_NOT_NUMERIC

    def test_options_not_mutated(self, stub_options: MessageOptions) -> None:
        """The ambient options record is left as it was."""
        node = Plural(NamedArgument("n"), {"other": C})
        plural_branch(node, 4, stub_options)
        assert stub_options.arg is None
        assert stub_options.plural_type is None

    @given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=0, max_value=5))
    def test_value_text_is_offset_number(self, n: int, offset: int) -> None:
        """The value placeholder text is always n - offset."""
        options = MessageOptions(locale="xx", backend=StubBackend())
        node = Plural(NamedArgument("n"), {"other": C}, offset=offset)
        _, branch_options = plural_branch(node, n, options)
        assert branch_options.arg == str(n - offset)

    def test_non_cldr_category_ignored(self) -> None:
        """A backend category outside the CLDR set cannot pick a select-style key."""
        backend = StubBackend(cardinal=lambda n: "female")
        options = MessageOptions(locale="xx", backend=backend)
        node = Plural(NamedArgument("n"), {"female": A, "other": C})

        branch, _ = plural_branch(node, 3, options)

        assert branch == C
