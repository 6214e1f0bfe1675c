from __future__ import annotations

from errors import SpecParseError
import utils


class ScoringSpec(object):
    """
    Scoring rule of a single subtask as given on the command line, e.g. "10+" or "25hs"
    """

    # Recognized trailing characters and the flag each of them sets
    SUFFIX_FLAGS = {
        'h': 'is_hidden',
        '+': 'is_by_test',
        's': 'is_first_fail',
        't': 'is_total_only',
    }

    def __init__(self, value: int, is_hidden=False, is_by_test=False, is_first_fail=False, is_total_only=False):
        """
        Create a new scoring rule
        :param value: Score of the whole group, or of every single test if is_by_test is set
        :param is_hidden: Results of the group are hidden from participants
        :param is_by_test: value is given per test instead of per group
        :param is_first_fail: Stop testing the group on the first failed test
        :param is_total_only: Participants only see the group total
        """
        self.value = value
        self.is_hidden = is_hidden
        self.is_by_test = is_by_test
        self.is_first_fail = is_first_fail
        self.is_total_only = is_total_only

    @staticmethod
    def split_suffixes(text: str) -> tuple[str, set[str]]:
        """
        Strip recognized flag characters from the end of the text
        :param text: Raw scoring spec
        :return: Remaining numeric prefix and the names of the flags found
        """
        end = len(text)
        flags = set()
        while end > 0 and text[end - 1] in ScoringSpec.SUFFIX_FLAGS:
            flags.add(ScoringSpec.SUFFIX_FLAGS[text[end - 1]])
            end -= 1

        return text[:end], flags

    @staticmethod
    def parse(text: str) -> ScoringSpec:
        """
        Build a scoring rule from its command line representation
        :param text: Non negative integer followed by any combination of the suffixes h, +, s and t
        :return: Parsed scoring rule
        :raises SpecParseError: If the numeric part is malformed, out of range or negative
        """
        prefix, flags = ScoringSpec.split_suffixes(text)
        value = utils.parse_int(prefix)
        if value is None or value < 0:
            raise SpecParseError(f"invalid score {prefix}")

        return ScoringSpec(value, **{flag: True for flag in flags})

    def __repr__(self):
        flags = ''.join(c for c, flag in ScoringSpec.SUFFIX_FLAGS.items() if getattr(self, flag))
        return f"ScoringSpec({self.value}{flags})"


class Group(object):
    """
    Base class of a scoring group covering one contiguous range of tests
    """

    KIND = None

    VISIBILITY_FULL = 'full'
    VISIBILITY_HIDDEN = 'hidden'
    VISIBILITY_BRIEF = 'brief'

    def __init__(self, serial: int, directory: str):
        self.serial = serial
        self.directory = directory
        self.first_test = None
        self.last_test = None
        self.score = 0
        self.test_score = 0

    @property
    def is_samples(self) -> bool:
        return False

    @property
    def is_hidden(self) -> bool:
        return False

    @property
    def is_by_test(self) -> bool:
        return False

    @property
    def is_first_fail(self) -> bool:
        return False

    @property
    def is_total_only(self) -> bool:
        return False

    @property
    def test_count(self) -> int:
        return self.last_test - self.first_test + 1

    @property
    def tests(self) -> str:
        """
        Test range in configuration syntax, a single number if the group has only one test
        """
        if self.first_test == self.last_test:
            return f"{self.first_test}"
        return f"{self.first_test}-{self.last_test}"

    @property
    def visibility(self) -> str:
        if self.is_samples:
            return Group.VISIBILITY_FULL
        elif self.is_hidden or self.is_total_only:
            return Group.VISIBILITY_HIDDEN
        return Group.VISIBILITY_BRIEF

    def set_range(self, first_test: int, last_test: int) -> None:
        self.first_test = first_test
        self.last_test = last_test

    def finalize_score(self) -> None:
        """
        Derive the group score from the per test score for by-test groups
        """
        if self.is_by_test:
            self.score = self.test_score * self.test_count

    def score_for_test(self, test: int) -> int:
        """
        Points awarded for a single test of this group
        :param test: Test number inside the group range
        :return: test_score for by-test groups, else the group score on the last test and 0 otherwise
        """
        if self.is_by_test:
            return self.test_score
        elif test == self.last_test:
            return self.score
        return 0

    def __repr__(self):
        return f"{type(self).__name__}({self.serial}, tests={self.first_test}-{self.last_test})"


class SamplesGroup(Group):
    """
    Group 0, the sample tests shown to participants
    """

    KIND = 'samples'

    def __init__(self, directory: str):
        super().__init__(0, directory)

    @property
    def is_samples(self) -> bool:
        return True


class SubtaskGroup(Group):
    """
    Group of a numbered subtask directory scored by its ScoringSpec
    """

    KIND = 'subtask'

    def __init__(self, index: int, directory: str, spec: ScoringSpec):
        if index < 1:
            raise ValueError(f"Subtask index must be positive, got {index}")

        super().__init__(index, directory)
        self.spec = spec
        if spec.is_by_test:
            self.test_score = spec.value
        else:
            self.score = spec.value

    @property
    def index(self) -> int:
        return self.serial

    @property
    def is_hidden(self) -> bool:
        return self.spec.is_hidden

    @property
    def is_by_test(self) -> bool:
        return self.spec.is_by_test

    @property
    def is_first_fail(self) -> bool:
        return self.spec.is_first_fail

    @property
    def is_total_only(self) -> bool:
        return self.spec.is_total_only


class GroupSet(object):
    """
    The samples group followed by all subtask groups in serial order
    """

    def __init__(self, samples: SamplesGroup, subtasks: list[SubtaskGroup]):
        self.samples = samples
        self.subtasks = list(subtasks)

    def __iter__(self):
        yield self.samples
        yield from self.subtasks

    def __len__(self):
        return len(self.subtasks) + 1

    @property
    def total_score(self) -> int:
        return sum(map(lambda g: g.score, self.subtasks))

    @property
    def final_test(self) -> int:
        return self.subtasks[-1].last_test if self.subtasks else self.samples.last_test

    @property
    def open_tests(self) -> str:
        return ",".join(f"{g.tests}:{g.visibility}" for g in self)

    @property
    def final_open_tests(self) -> str:
        return f"1-{self.final_test}:{Group.VISIBILITY_FULL}"

    @property
    def test_scores(self) -> list[int]:
        """
        Score of every single test across all groups in test order
        """
        result = []
        for group in self:
            for test in range(group.first_test, group.last_test + 1):
                result.append(group.score_for_test(test))
        return result
