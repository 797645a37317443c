"""
Unit tests for sequential verse segmentation.
"""

import pytest
from mushaf.core.segmenter import (
    MarkerConvention,
    find_markers,
    join_verses,
    normalize_whitespace,
    segment,
)


def as_tuples(verses):
    return [verse.as_tuple() for verse in verses]


BOTH_CONVENTIONS = [MarkerConvention.MID_STREAM, MarkerConvention.END_OF_UNIT]


class TestSegmentBasics:
    """Test the accept-next-number state machine."""

    def test_end_of_unit_markers(self):
        """Test two verses closed by their own numbers."""
        verses = segment("Hello ١ World ٢", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "Hello"), (2, "World")]

    def test_mid_stream_markers(self):
        """Test markers surrounded by spaces."""
        verses = segment(" بِسۡمِ ١ اللَّه ٢ ", MarkerConvention.MID_STREAM)
        assert as_tuples(verses) == [(1, "بِسۡمِ"), (2, "اللَّه")]

    def test_non_sequential_markers_become_text(self):
        """Test that 10 and 2 are both rejected while 1 is expected."""
        content = "الٓرۚ تِلۡكَ ١٠ ءَايَٰتُ ٢"
        verses = segment(content, MarkerConvention.MID_STREAM)
        assert as_tuples(verses) == [(1, content)]

    def test_gap_in_numbering(self):
        """Test that a skipped number stops boundaries from being accepted."""
        verses = segment("first ١ second ٣ third", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "first"), (2, "second ٣ third")]

    def test_repeated_number_is_text(self):
        """Test a second marker with an already used number stays in the verse."""
        verses = segment("a ١ b ١ c ٢", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a"), (2, "b ١ c")]

    def test_lower_number_is_text(self):
        verses = segment("a ١ b ٢ c ١ d ٣", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a"), (2, "b"), (3, "c ١ d")]

    def test_trailing_text_becomes_last_verse(self):
        """Test text after the last accepted marker is numbered next."""
        verses = segment("a ١ b ٢ c", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a"), (2, "b"), (3, "c")]

    def test_multi_digit_numbers(self):
        """Test numbering continues past single digits."""
        content = " ".join(f"verse{n} {number}" for n, number in enumerate(
            ["١", "٢", "٣", "٤", "٥", "٦", "٧", "٨", "٩", "١٠", "١١", "١٢"], 1
        ))
        verses = segment(content, MarkerConvention.END_OF_UNIT)

        assert [v.number for v in verses] == list(range(1, 13))
        assert verses[-1].text == "verse12"

    def test_mixed_alphabets_in_one_document(self):
        """Test both Indic alphabets are matched in the same scan."""
        verses = segment("a ١ b ۲ c ٣", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a"), (2, "b"), (3, "c")]

    def test_convention_given_as_string(self):
        verses = segment("a ١ b ٢", "mid_stream")
        assert as_tuples(verses) == [(1, "a"), (2, "b")]

    def test_unknown_convention_raises(self):
        with pytest.raises(ValueError):
            segment("a ١", "sideways")


class TestSegmentEdgeCases:
    """Test empty, unmarked and oddly spaced input."""

    @pytest.mark.parametrize("convention", BOTH_CONVENTIONS)
    @pytest.mark.parametrize("content", ["", "   ", " \n\t "])
    def test_blank_content(self, content, convention):
        """Test blank content yields no verses."""
        assert segment(content, convention) == []

    @pytest.mark.parametrize("convention", BOTH_CONVENTIONS)
    def test_content_without_numerals(self, convention):
        """Test unmarked content becomes a single verse numbered 1."""
        verses = segment("  قُلۡ هُوَ ٱللَّهُ   أَحَدٌ ", convention)
        assert as_tuples(verses) == [(1, "قُلۡ هُوَ ٱللَّهُ أَحَدٌ")]

    def test_whitespace_is_collapsed(self):
        """Test newlines and runs of spaces become single spaces."""
        verses = segment("a\n\n ١\tb   c ٢", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a"), (2, "b c")]

    def test_end_of_unit_needs_no_left_space(self):
        verses = segment("abc١ def٢", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "abc"), (2, "def")]

    def test_mid_stream_needs_left_space(self):
        verses = segment("abc١ def٢", MarkerConvention.MID_STREAM)
        assert as_tuples(verses) == [(1, "abc١ def٢")]

    def test_marker_followed_by_letter_is_not_a_marker(self):
        verses = segment("foo ١x bar ١", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "foo ١x bar")]

    def test_empty_verse_is_dropped(self):
        """Test a marker closing no text is consumed without emitting a verse."""
        verses = segment("١ foo ٢", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(2, "foo")]

    def test_mid_stream_ignores_leading_marker(self):
        """Test a marker at the very start has no left space under mid-stream."""
        verses = segment("١ foo ٢", MarkerConvention.MID_STREAM)
        assert as_tuples(verses) == [(1, "١ foo ٢")]

    def test_ascii_digits_are_never_markers(self):
        verses = segment("a 1 b 2", MarkerConvention.END_OF_UNIT)
        assert as_tuples(verses) == [(1, "a 1 b 2")]

    def test_repeated_calls_are_independent(self):
        """Test no state leaks between calls."""
        first = segment("a ١ b ٢", MarkerConvention.END_OF_UNIT)
        second = segment("a ١ b ٢", MarkerConvention.END_OF_UNIT)
        assert first == second


class TestRoundTrip:
    """Test that rebuilt text segments back to the same verses."""

    @pytest.mark.parametrize("convention", BOTH_CONVENTIONS)
    def test_resegmenting_joined_verses(self, convention):
        content = (
            "الٓرۚ تِلۡكَ ءَايَٰتُ ٱلۡكِتَٰبِ ٱلۡحَكِيمِ ١ "
            "أَكَانَ لِلنَّاسِ عَجَبًا ٢ "
            "إِنَّ رَبَّكُمُ ٱللَّهُ ٣ "
            "إِلَيۡهِ مَرۡجِعُكُمۡ"
        )
        verses = segment(content, convention)
        assert len(verses) == 4

        assert segment(join_verses(verses), convention) == verses

    def test_join_verses_format(self, sample_surah):
        joined = join_verses(sample_surah.verses[:2])
        assert joined == "وَٱلۡعَصۡرِ ١ إِنَّ ٱلۡإِنسَٰنَ لَفِي خُسۡرٍ ٢"

    def test_join_verses_extended_digits(self, sample_surah):
        joined = join_verses(sample_surah.verses[:1], alphabet="extended_arabic_indic")
        assert joined.endswith(" ۱")


class TestFindMarkers:
    """Test candidate marker discovery."""

    def test_positions_and_values(self):
        content = "a ١٠ b ٢"
        markers = find_markers(content, MarkerConvention.MID_STREAM)

        assert [(m.text, m.value) for m in markers] == [("١٠", 10), ("٢", 2)]
        for marker in markers:
            assert content[marker.start:marker.end] == marker.text

    def test_runs_are_maximal(self):
        """Test a multi-digit run is one candidate, not several."""
        markers = find_markers("abc١٢٣ ", MarkerConvention.END_OF_UNIT)
        assert [m.value for m in markers] == [123]

    def test_adjacent_markers(self):
        """Test two markers separated by one space are both found."""
        markers = find_markers("a ١ ٢ b", MarkerConvention.MID_STREAM)
        assert [m.value for m in markers] == [1, 2]


class TestNormalizeWhitespace:

    def test_collapses_runs(self):
        assert normalize_whitespace("a \n\t b") == "a b"

    def test_keeps_edges(self):
        assert normalize_whitespace("  a  ") == " a "
