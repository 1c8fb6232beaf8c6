"""
Unit tests for response cleanup, day segmentation and check-in/out times.
"""

from itinerary.parser.segments import (
    clean_response_text,
    extract_stay_times,
    segment_days,
)


class TestCleanResponseText:
    """Tests for markdown stripping."""

    def test_strips_emphasis_markers(self):
        """Asterisks and underscores are removed."""
        assert clean_response_text("**Day 1:** _Fort_ visit") == "Day 1: Fort visit"

    def test_plain_text_unchanged(self):
        """Text without markers passes through."""
        assert clean_response_text("Day 1: Fort") == "Day 1: Fort"


class TestSegmentDays:
    """Tests for the day segmenter."""

    def test_one_segment_per_label(self):
        """N labels yield N segments."""
        text = "Day 1: Fort\nDay 2: Lake\nDay 3: Market"
        assert segment_days(text) == ["Fort", "Lake", "Market"]

    def test_label_numbers_are_ignored(self):
        """Skipped label numbers still produce consecutive segments."""
        text = "Day 1: Fort\nDay 3: Lake"
        assert segment_days(text) == ["Fort", "Lake"]

    def test_dash_separator(self):
        """'Day N -' is accepted as a label."""
        text = "Day 1 - Fort\nDay 2- Lake"
        assert segment_days(text) == ["Fort", "Lake"]

    def test_preamble_discarded(self):
        """Text before the first label is not a day."""
        text = "Here is your plan!\n\nDay 1: Fort"
        assert segment_days(text) == ["Fort"]

    def test_no_labels_returns_empty(self):
        """Without labels there are no days."""
        assert segment_days("A lovely trip with no structure") == []
        assert segment_days("") == []

    def test_blank_segments_dropped(self):
        """A label followed only by whitespace yields nothing."""
        text = "Day 1:\n   \nDay 2: Lake"
        assert segment_days(text) == ["Lake"]

    def test_segment_keeps_multiline_content(self):
        """Everything up to the next label belongs to the day."""
        text = "Day 1:\n09:00 Fort\nBreakfast: Cafe\nDay 2: Lake"
        assert segment_days(text)[0] == "09:00 Fort\nBreakfast: Cafe"


class TestExtractStayTimes:
    """Tests for check-in/check-out extraction."""

    def test_both_times(self):
        """Hyphenated labels with colons."""
        text = "Check-in: 14:00\nCheck-out: 11:00"
        assert extract_stay_times(text) == ("14:00", "11:00")

    def test_space_separated_and_case_insensitive(self):
        """'check in' / 'CHECK OUT' forms are recognised."""
        text = "check in 13:30 and CHECK OUT 10:00"
        assert extract_stay_times(text) == ("13:30", "10:00")

    def test_absent_times_are_none(self):
        """Missing labels leave the fields unset."""
        assert extract_stay_times("09:00 Fort") == (None, None)

    def test_only_check_out(self):
        """One field can be present without the other."""
        assert extract_stay_times("Check-out: 9:45") == (None, "9:45")
