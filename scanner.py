from __future__ import annotations

import logging
import os
import stat
import string

import utils
from errors import ContentError, LayoutError, SpecParseError
from model import Group

logger = logging.getLogger(__name__)


class ProblemDirectory(object):
    """
    Read only view of a test root holding a samples directory and numbered subtask directories
    """

    def __init__(self, path: str, layout: dict):
        """
        Create a new test directory view
        :param path: Root of the test data
        :param layout: Layout options (see the "layout" section of the configuration)
        """
        self.path = path
        self.samples_directory = layout['samples_directory']
        self.subtask_prefix = layout['subtask_prefix']
        self.max_subtask = layout['max_subtask']
        self.answer_suffix = layout['answer_suffix']
        self.test_name_width = layout['test_name_width']

    @property
    def samples_path(self) -> str:
        return os.path.join(self.path, self.samples_directory)

    def subtask_path(self, index: int) -> str:
        return os.path.join(self.path, f"{self.subtask_prefix}{index}")

    def test_path(self, directory: str, test: int) -> str:
        return os.path.join(directory, f"{test:0{self.test_name_width}d}")

    def answer_path(self, directory: str, test: int) -> str:
        return self.test_path(directory, test) + self.answer_suffix

    def validate(self) -> int:
        """
        Check the complete directory layout
        :return: Number of subtasks found
        """
        self.validate_root()
        self.validate_samples()
        subtask_count = self.discover_subtasks()
        self.check_consecutive(subtask_count)
        return subtask_count

    def validate_root(self) -> None:
        self._require_directory(self.path, f"test directory '{self.path}' does not exist")

    def validate_samples(self) -> None:
        path = self.samples_path
        self._require_directory(path, f"samples directory '{path}' does not exist")

    def discover_subtasks(self) -> int:
        """
        Check every entry of the test root and count the subtask directories
        :return: Number of subtask entries
        :raises LayoutError: On unexpected entries, missing or duplicated subtask directories
        :raises ContentError: If there is no subtask at all
        """
        try:
            entries = sorted(os.listdir(self.path))
        except OSError as e:
            raise LayoutError(f"cannot open directory '{self.path}': {e.strerror}")

        seen = {}
        for name in entries:
            if name == self.samples_directory:
                continue

            index = self._subtask_index(name)
            if index is None:
                raise LayoutError(f"directory '{self.path}' contains invalid entry '{name}'")

            path = self.subtask_path(index)
            self._require_directory(path, f"subtask directory '{path}' does not exist")

            if index in seen:
                raise LayoutError(f"directory '{self.path}' contains duplicate subtask entries "
                                  f"'{seen[index]}' and '{name}'")
            seen[index] = name

        if not seen:
            raise ContentError("no subtasks")

        logger.debug(f"Found {len(seen)} subtasks in {self.path}")
        return len(seen)

    def check_consecutive(self, subtask_count: int) -> None:
        """
        Make sure the subtasks are numbered 1..subtask_count without gaps
        """
        for index in range(1, subtask_count + 1):
            path = self.subtask_path(index)
            self._require_directory(path, f"subtask directory '{path}' does not exist")

    def scan_group(self, group: Group) -> None:
        """
        Determine the test range of a group and check that every test has its data and answer file
        :param group: Group to scan, its range is updated in place
        :raises SpecParseError: If a test file name is not a valid test number
        :raises ContentError: If the group has no tests or a file is missing
        """
        directory = group.directory
        try:
            entries = os.listdir(directory)
        except OSError:
            raise LayoutError(f"cannot open directory '{directory}'")

        numbers = []
        for name in entries:
            if not name or name[0] not in string.digits:
                continue

            test = utils.leading_number(name)
            if test is None or test <= 0:
                raise SpecParseError(f"invalid test name '{name}'")
            numbers.append(test)

        if not numbers:
            raise ContentError(f"no tests in subtask {group.serial}")

        first_test, last_test = min(numbers), max(numbers)
        for test in range(first_test, last_test + 1):
            self._require_file(self.test_path(directory, test), 'test file')
            self._require_file(self.answer_path(directory, test), 'answer file')

        logger.debug(f"Group {group.serial} in {directory} covers tests {first_test}-{last_test}")
        group.set_range(first_test, last_test)

    def _subtask_index(self, name: str) -> int | None:
        if not name.startswith(self.subtask_prefix):
            return None

        index = utils.parse_int(name[len(self.subtask_prefix):])
        if index is None or index <= 0 or index > self.max_subtask:
            return None

        return index

    @staticmethod
    def _require_directory(path: str, missing_message: str) -> None:
        try:
            mode = os.lstat(path).st_mode
        except OSError:
            raise LayoutError(missing_message)

        if not stat.S_ISDIR(mode):
            raise LayoutError(f"'{path}' is not a directory")

    @staticmethod
    def _require_file(path: str, description: str) -> None:
        try:
            mode = os.lstat(path).st_mode
        except OSError:
            raise ContentError(f"{description} '{path}' does not exist")

        if not stat.S_ISREG(mode):
            raise ContentError(f"{description} '{path}' is not regular")
