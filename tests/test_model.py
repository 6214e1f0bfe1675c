import pytest
from errors import SpecParseError
from model import Group, GroupSet, SamplesGroup, ScoringSpec, SubtaskGroup


class TestScoringSpec:
    """Test class for parsing scoring specs from the command line."""

    def test_plain_score(self):
        spec = ScoringSpec.parse("25")
        assert spec.value == 25
        assert not spec.is_hidden
        assert not spec.is_by_test
        assert not spec.is_first_fail
        assert not spec.is_total_only

    def test_zero_score_is_valid(self):
        spec = ScoringSpec.parse("0")
        assert spec.value == 0
        assert not spec.is_by_test

    def test_single_suffixes(self):
        assert ScoringSpec.parse("10h").is_hidden
        assert ScoringSpec.parse("10+").is_by_test
        assert ScoringSpec.parse("10s").is_first_fail
        assert ScoringSpec.parse("10t").is_total_only

    def test_combined_suffixes_any_order(self):
        for text in ["7h+st", "7ts+h", "7+hts"]:
            spec = ScoringSpec.parse(text)
            assert spec.value == 7
            assert spec.is_hidden and spec.is_by_test and spec.is_first_fail and spec.is_total_only

    def test_repeated_suffix(self):
        spec = ScoringSpec.parse("3hh")
        assert spec.value == 3
        assert spec.is_hidden

    def test_split_suffixes_stops_at_unknown_character(self):
        prefix, flags = ScoringSpec.split_suffixes("1h2s")
        assert prefix == "1h2"
        assert flags == {"is_first_fail"}

    def test_suffix_inside_number_is_rejected(self):
        with pytest.raises(SpecParseError) as exc_info:
            ScoringSpec.parse("1h2s")
        assert "invalid score 1h2" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "h", "+", "abc", "-1", "-5+", "2147483648", "1.5"])
    def test_invalid(self, text):
        with pytest.raises(SpecParseError):
            ScoringSpec.parse(text)

    def test_negative_zero_is_accepted(self):
        assert ScoringSpec.parse("-0").value == 0


def build_groups(*subtask_specs, ranges):
    """Build a GroupSet with the given test ranges, the first range belongs to the samples."""
    samples = SamplesGroup("samples")
    subtasks = [SubtaskGroup(i, f"subtask{i}", ScoringSpec.parse(text))
                for i, text in enumerate(subtask_specs, start=1)]
    groups = GroupSet(samples, subtasks)
    for group, (first, last) in zip(groups, ranges):
        group.set_range(first, last)
    for group in groups.subtasks:
        group.finalize_score()
    return groups


class TestGroup:

    def test_samples_defaults(self):
        samples = SamplesGroup("samples")
        assert samples.serial == 0
        assert samples.is_samples
        assert samples.score == 0
        assert not samples.is_by_test
        assert samples.visibility == Group.VISIBILITY_FULL

    def test_subtask_index_must_be_positive(self):
        with pytest.raises(ValueError):
            SubtaskGroup(0, "subtask0", ScoringSpec.parse("1"))

    def test_score_goes_to_test_score_when_by_test(self):
        group = SubtaskGroup(1, "subtask1", ScoringSpec.parse("4+"))
        assert group.test_score == 4
        assert group.score == 0

    def test_tests_range(self):
        group = SubtaskGroup(1, "subtask1", ScoringSpec.parse("4"))
        group.set_range(3, 3)
        assert group.tests == "3"
        group.set_range(3, 9)
        assert group.tests == "3-9"

    def test_by_test_score(self):
        group = SubtaskGroup(1, "subtask1", ScoringSpec.parse("4+"))
        group.set_range(3, 5)
        group.finalize_score()
        assert group.score == 12
        assert [group.score_for_test(t) for t in range(3, 6)] == [4, 4, 4]

    def test_group_score_is_attributed_to_last_test(self):
        group = SubtaskGroup(1, "subtask1", ScoringSpec.parse("30"))
        group.set_range(3, 5)
        group.finalize_score()
        assert group.score == 30
        assert [group.score_for_test(t) for t in range(3, 6)] == [0, 0, 30]

    @pytest.mark.parametrize("text, visibility", [
        ("1", "brief"), ("1+", "brief"), ("1s", "brief"), ("1h", "hidden"), ("1t", "hidden"), ("1ht", "hidden"),
    ])
    def test_visibility(self, text, visibility):
        assert SubtaskGroup(1, "subtask1", ScoringSpec.parse(text)).visibility == visibility


class TestGroupSet:

    def test_iteration_order(self):
        groups = build_groups("10", "20", ranges=[(1, 1), (2, 3), (4, 5)])
        assert [g.serial for g in groups] == [0, 1, 2]
        assert len(groups) == 3

    def test_total_score_excludes_samples(self):
        groups = build_groups("10", "5+", ranges=[(1, 2), (3, 4), (5, 7)])
        assert groups.total_score == 25

    def test_open_tests(self):
        groups = build_groups("10", "5+h", "3t", ranges=[(1, 2), (3, 3), (4, 6), (7, 8)])
        assert groups.open_tests == "1-2:full,3:brief,4-6:hidden,7-8:hidden"
        assert groups.final_open_tests == "1-8:full"

    def test_one_score_per_test(self):
        groups = build_groups("10", "5+", ranges=[(1, 2), (3, 4), (5, 7)])
        assert groups.test_scores == [0, 0, 0, 10, 5, 5, 5]
        assert len(groups.test_scores) == groups.final_test
        assert sum(groups.test_scores) == groups.total_score
