"""
Tests for plate pattern matching and the fallback heuristic
"""

import pytest

from src.core.plate_rules import PlateExtractionPolicy, compile_patterns, separator_class
from src.domain.Services.fallback_heuristic import FallbackPlateHeuristic
from src.domain.Services.plate_pattern_matcher import PlatePatternMatcher


@pytest.fixture
def matcher() -> PlatePatternMatcher:
    return PlatePatternMatcher(PlateExtractionPolicy.build().patterns)


class TestPatternCompilation:

    def test_separator_class_always_has_space(self):
        assert separator_class("") == "[ ]"
        assert separator_class("-") == r"[ \-]"

    def test_priority_follows_configured_order(self):
        patterns = compile_patterns([r"^A{sep}B$", r"^C$"], "-")
        assert [p.priority for p in patterns] == [0, 1]
        assert patterns[0].matches("A-B")
        assert patterns[0].matches("A B")
        assert not patterns[0].matches("A~B")


class TestPlatePatternMatcher:

    @pytest.mark.parametrize("plate", [
        "LGX 137", "GMP 929", "ABC-1234", "ABC123", "7ABC123", "123 ABC", "AB1 234", "AB 12345",
    ])
    def test_known_formats(self, matcher, plate):
        assert matcher.match_single([plate]) == plate

    @pytest.mark.parametrize("line", ["2024", "AB1", "234", "WELCOME", "HELLO WORLD", "SPOT 12345"])
    def test_non_plates(self, matcher, line):
        assert matcher.match_single([line]) is None

    def test_first_candidate_wins_over_pattern_priority(self, matcher):
        # "AB 12345" coincide con un patrón de menor prioridad pero aparece antes
        assert matcher.match(["AB 12345", "LGX 137"]) == "AB 12345"

    def test_first_matching_pattern_is_reported(self, matcher):
        assert matcher.first_pattern("LGX 137").priority == 0
        assert matcher.first_pattern("AB1 234").priority == 3

    def test_adjacent_pair_is_space_joined(self, matcher):
        assert matcher.match(["AB1", "234"]) == "AB1 234"

    def test_pairs_only_after_single_pass(self, matcher):
        # "LGX" + "137" formaría placa, pero "7ABC123" ya coincide solo
        assert matcher.match(["LGX", "137", "7ABC123"]) == "7ABC123"

    def test_pairs_are_adjacent_only(self, matcher):
        assert matcher.match_pairs(["AB1", "WELCOME", "234"]) is None

    def test_does_not_mutate_input(self, matcher):
        candidates = ["AB1", "234"]
        matcher.match(candidates)
        assert candidates == ["AB1", "234"]

    def test_deterministic(self, matcher):
        candidates = ["WELCOME", "AB1", "234", "LGX", "137"]
        assert {matcher.match(candidates) for _ in range(5)} == {"AB1 234"}

    def test_no_candidates(self, matcher):
        assert matcher.match([]) is None


class TestFallbackPlateHeuristic:

    def test_rejects_bare_four_digit_number(self):
        fallback = FallbackPlateHeuristic()
        assert not fallback.accepts("2024")
        assert fallback.select(["2024"]) is None

    def test_other_numbers_allowed(self):
        fallback = FallbackPlateHeuristic()
        assert fallback.accepts("123")
        assert fallback.accepts("12345")

    def test_length_window(self):
        fallback = FallbackPlateHeuristic(min_len=3, max_len=8)
        assert not fallback.accepts("AB")
        assert fallback.accepts("ABC")
        assert fallback.accepts("ABCD1234")
        assert not fallback.accepts("ABCDE12345")

    def test_whitespace_is_ignored_for_length(self):
        assert FallbackPlateHeuristic().accepts("7 AB 12")

    def test_rejects_separators(self):
        assert not FallbackPlateHeuristic().accepts("AB-12")

    def test_configurable_window(self):
        fallback = FallbackPlateHeuristic(min_len=5, max_len=8)
        assert not fallback.accepts("XY12")
        assert fallback.accepts("XY123")

    def test_first_qualifying_candidate(self):
        assert FallbackPlateHeuristic().select(["2024", "HELLO1", "ZZ99"]) == "HELLO1"
