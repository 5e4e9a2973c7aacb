"""Tests for tick count parsing (parse_tick_counts, parse_tick_counts_report)."""

import pytest
from nice_ticks import parse_tick_counts, parse_tick_counts_report, DEFAULT_TICK_COUNTS


class TestParseTickCounts:
    """Tests for the lenient parser."""

    def test_basic_list(self):
        assert parse_tick_counts("7, 5, 3") == (7, 5, 3)

    def test_no_spaces(self):
        assert parse_tick_counts("7,5,3") == (7, 5, 3)

    def test_empty_string_gives_default(self):
        assert parse_tick_counts("") == (9, 8, 7, 6, 5, 4, 3)

    def test_whitespace_gives_default(self):
        assert parse_tick_counts("   ") == DEFAULT_TICK_COUNTS

    def test_none_gives_default(self):
        assert parse_tick_counts(None) == DEFAULT_TICK_COUNTS

    def test_invalid_token_dropped(self):
        """Tokens that are not integers are dropped, the rest kept."""
        assert parse_tick_counts("abc, 5") == (5,)

    def test_non_positive_dropped(self):
        assert parse_tick_counts("0, -3, 4") == (4,)

    def test_decimal_dropped(self):
        assert parse_tick_counts("5.5, 6") == (6,)

    def test_all_invalid_gives_default(self):
        assert parse_tick_counts("a, b, -1") == DEFAULT_TICK_COUNTS

    def test_blank_tokens_skipped(self):
        """Trailing and doubled commas, as typed mid-edit, are harmless."""
        assert parse_tick_counts("7,, 5,") == (7, 5)

    @pytest.mark.parametrize("token", ["1_000", "+5", " \u00b2", "\u0661", "0x10"])
    def test_only_plain_digits(self, token):
        """Signs, underscores and non-ASCII digits are rejected."""
        report = parse_tick_counts_report(f"{token}, 4")
        assert report.counts == (4,)
        assert report.rejected == (token.strip(),)

    def test_order_preserved(self):
        assert parse_tick_counts("3, 9, 5") == (3, 9, 5)

    @pytest.mark.parametrize("text", ["", "x", ",,,", "1e3", "\U0001f642", "\n"])
    def test_never_raises(self, text):
        counts = parse_tick_counts(text)
        assert len(counts) > 0
        assert all(isinstance(k, int) and k > 0 for k in counts)


class TestParseTickCountsReport:
    """Tests for the parser that reports rejected tokens."""

    def test_clean_input(self):
        report = parse_tick_counts_report("7, 5")
        assert report.counts == (7, 5)
        assert report.rejected == ()
        assert report.used_default is False

    def test_rejected_tokens(self):
        report = parse_tick_counts_report("abc, 5, -2")
        assert report.counts == (5,)
        assert report.rejected == ("abc", "-2")
        assert report.used_default is False

    def test_default_flag(self):
        report = parse_tick_counts_report("abc")
        assert report.counts == DEFAULT_TICK_COUNTS
        assert report.rejected == ("abc",)
        assert report.used_default is True

    def test_empty_is_default_without_rejections(self):
        report = parse_tick_counts_report("")
        assert report.used_default is True
        assert report.rejected == ()
