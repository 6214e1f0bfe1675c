from __future__ import annotations

import config as config_module
import utils
from errors import StructureError, UsageError
from formatters.formatter_factory import get_formatter
from model import GroupSet, SamplesGroup, ScoringSpec, SubtaskGroup
from scanner import ProblemDirectory


class GroupGenerator(config_module.ConfigurationBasedObject):

    def __init__(self, config, environment='prod'):
        """
        Create a new group generator and supply the application configuration
        :param config: The configuration passed by the user (may contain a list in decreasing order of priority)
        :param environment: Runtime environment to use as optional suffix to configuration parameters
        """
        super().__init__(config, environment)

    def run(self, test_directory: str, specs: list[str], command_line: list[str], output_format=None) -> str:
        """
        Validate the test directory and render the group configuration
        :param test_directory: Root of the test data
        :param specs: One scoring spec per subtask, in subtask order
        :param command_line: Full command line echoed at the top of the output
        :param output_format: Formatter name, the configured format is used if None
        :return: Rendered configuration text
        """
        groups = self.build(test_directory, specs)
        return self.render(groups, command_line, output_format)

    def build(self, test_directory: str, specs: list[str]) -> GroupSet:
        """
        Run every validation step and compute the scored groups
        :param test_directory: Root of the test data
        :param specs: One scoring spec per subtask, in subtask order
        :return: Fully scanned and scored groups
        """
        directory = ProblemDirectory(test_directory, self.layout)
        subtask_count = directory.validate()

        if len(specs) != subtask_count:
            raise UsageError("wrong number of arguments")

        subtasks = []
        for index, text in enumerate(specs, start=1):
            spec = ScoringSpec.parse(text)
            self.logger.debug(f"Subtask {index} uses {spec}")
            subtasks.append(SubtaskGroup(index, directory.subtask_path(index), spec))

        groups = GroupSet(SamplesGroup(directory.samples_path), subtasks)
        for group in groups:
            directory.scan_group(group)

        self.finalize(groups)
        return groups

    def finalize(self, groups: GroupSet) -> None:
        """
        Check that the test numbers are contiguous and compute the group scores
        :param groups: Scanned groups
        :raises StructureError: If the samples do not start at 1, two groups do not join up
            or a score leaves the 32 bit signed range
        """
        if groups.samples.first_test != 1:
            raise StructureError("first test number must be 1")

        previous = groups.samples
        for group in groups.subtasks:
            if previous.last_test + 1 != group.first_test:
                raise StructureError(f"last test in group {previous.serial} is {previous.last_test}, "
                                     f"but the first test in group {group.serial} is {group.first_test}")
            previous = group

        for group in groups.subtasks:
            group.finalize_score()
            if group.score > utils.INT_MAX:
                raise StructureError(f"score of group {group.serial} is {group.score}, "
                                     f"which exceeds {utils.INT_MAX}")

        if groups.total_score > utils.INT_MAX:
            raise StructureError(f"full score is {groups.total_score}, which exceeds {utils.INT_MAX}")

        self.logger.debug(f"Total score of {len(groups.subtasks)} subtasks is {groups.total_score}")

    def render(self, groups: GroupSet, command_line: list[str], output_format=None) -> str:
        output_format = output_format or self.output['format']
        formatter = get_formatter(output_format, self.output)
        return formatter.format(groups, command_line)
