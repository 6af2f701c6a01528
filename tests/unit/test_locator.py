from regatta_parser.extraction.formats import FormatProfile, TableFormat
from regatta_parser.extraction.locator import (
    CandidateNumber,
    ParticipantLocator,
    find_sail_number_line,
    locate_rank_column,
)
from regatta_parser.extraction.models import Confidence, ExtractionIssue

GENERIC = FormatProfile()


class TestFindSailNumberLine:
    def test_whitespace_tolerant_match(self) -> None:
        lines = ["Herbstpokal", "17 GER 12345 Max Mustermann"]
        assert find_sail_number_line(lines, "GER12345") == (1, 7)

    def test_bare_digits_match(self) -> None:
        lines = ["3 12345 Max Mustermann"]
        assert find_sail_number_line(lines, "GER 12345") == (0, 2)

    def test_digits_inside_longer_number_do_not_match(self) -> None:
        assert find_sail_number_line(["3 123456 Max"], "GER12345") is None

    def test_first_matching_line_wins(self) -> None:
        lines = ["2 GER 4711 Anna", "9 GER 4711 Anna"]
        assert find_sail_number_line(lines, "GER4711") == (0, 6)


class TestLocateRankColumn:
    def test_no_candidates(self) -> None:
        assert locate_rank_column([], GENERIC) is None

    def test_single_candidate(self) -> None:
        assert locate_rank_column([CandidateNumber(5, 0)], GENERIC) == 5

    def test_bib_layout_takes_first(self) -> None:
        profile = FormatProfile(kind=TableFormat.BIB_NUMBER, rank_column_index=1)
        candidates = [CandidateNumber(4, 0), CandidateNumber(112, 2)]
        assert locate_rank_column(candidates, profile) == 4

    def test_header_column_index(self) -> None:
        profile = FormatProfile(rank_column_index=1)
        candidates = [CandidateNumber(33, 0), CandidateNumber(6, 3)]
        assert locate_rank_column(candidates, profile) == 6

    def test_index_out_of_range_falls_back_to_first(self) -> None:
        profile = FormatProfile(rank_column_index=5)
        candidates = [CandidateNumber(2, 0), CandidateNumber(8, 2)]
        assert locate_rank_column(candidates, profile) == 2


class TestParticipantLocator:
    def test_rank_before_spaced_sail_number(self) -> None:
        result = ParticipantLocator().locate(
            ["Herbstpokal", "17 GER 12345 Max Mustermann"], "GER12345", GENERIC
        )
        assert result.participant is not None
        assert result.participant.rank == 17
        assert result.participant.sail_number == "GER12345"
        assert result.confidence is Confidence.HIGH
        assert result.line_index == 1
        assert result.issues == []

    def test_spaced_query_matches_compact_sail_number(self) -> None:
        result = ParticipantLocator().locate(["17 GER12345 Max Mustermann"], "GER 12345", GENERIC)
        assert result.participant is not None
        assert result.participant.rank == 17
        assert result.participant.sail_number == "GER12345"
        assert result.confidence is Confidence.HIGH

    def test_sailor_name_is_copied(self) -> None:
        result = ParticipantLocator().locate(
            ["17 GER 12345 Max Mustermann"], "GER12345", GENERIC, sailor_name="Max Mustermann"
        )
        assert result.participant is not None
        assert result.participant.name == "Max Mustermann"

    def test_several_numbers_flag_ambiguous_layout(self) -> None:
        profile = FormatProfile(kind=TableFormat.BIB_NUMBER)
        result = ParticipantLocator().locate(["4 112 GER 4711 Anna Berg"], "GER4711", profile)
        assert result.participant is not None
        assert result.participant.rank == 4
        assert result.confidence is Confidence.MEDIUM
        assert ExtractionIssue.AMBIGUOUS_COLUMN_LAYOUT in result.issues

    def test_rank_at_bound_is_accepted(self) -> None:
        result = ParticipantLocator(rank_bound=500).locate(["500 GER 4711"], "GER4711", GENERIC)
        assert result.participant is not None
        assert result.participant.rank == 500

    def test_rank_above_bound_is_discarded(self) -> None:
        result = ParticipantLocator(rank_bound=500).locate(["501 GER 4711"], "GER4711", GENERIC)
        assert result.participant is None
        assert ExtractionIssue.IMPLAUSIBLE_RANK in result.issues
        assert ExtractionIssue.PARTICIPANT_NOT_FOUND in result.issues
        assert result.feedback == 'No plausible rank next to sail number "GER4711".'

    def test_implausible_column_falls_back_to_leading_rank(self) -> None:
        profile = FormatProfile(rank_column_index=1)
        result = ParticipantLocator().locate(["7 2024 GER 4711 Anna"], "GER4711", profile)
        assert result.participant is not None
        assert result.participant.rank == 7
        assert result.confidence is Confidence.MEDIUM
        assert ExtractionIssue.IMPLAUSIBLE_RANK in result.issues

    def test_no_number_before_sail_number(self) -> None:
        result = ParticipantLocator().locate(["GER 4711 Anna Berg 3"], "GER4711", GENERIC)
        assert result.participant is None
        assert ExtractionIssue.PARTICIPANT_NOT_FOUND in result.issues

    def test_not_found_with_digits_in_text(self) -> None:
        raw = "1 GER 1234 Anna Berg"
        result = ParticipantLocator().locate([raw], "GER12345", GENERIC, raw_text="x 12345 y")
        assert result.participant is None
        assert result.feedback == (
            'Sail number "GER12345" not found. '
            "The digits appear in the text, please correct manually."
        )

    def test_not_found_at_all(self) -> None:
        result = ParticipantLocator().locate(["1 GER 4711 Anna"], "GER 999", GENERIC)
        assert result.participant is None
        assert result.issues == [ExtractionIssue.PARTICIPANT_NOT_FOUND]
        assert result.feedback == 'Sail number "GER 999" not found. Please enter the result manually.'

    def test_blank_sail_number(self) -> None:
        result = ParticipantLocator().locate(["1 GER 4711 Anna"], "  ", GENERIC)
        assert result.participant is None
        assert result.issues == [ExtractionIssue.PARTICIPANT_NOT_FOUND]

    def test_vendor_flags_do_not_change_rank_selection(self) -> None:
        vendor = FormatProfile(kind=TableFormat.VENDOR, is_vendor_export=True, has_rank_column=True)
        line = ["7 112 GER 4711 Anna Berg"]
        from_vendor = ParticipantLocator().locate(line, "GER4711", vendor)
        from_generic = ParticipantLocator().locate(line, "GER4711", GENERIC)
        assert from_vendor.participant == from_generic.participant
        assert from_vendor.participant is not None
        assert from_vendor.participant.rank == 7
        assert from_vendor.confidence is from_generic.confidence
