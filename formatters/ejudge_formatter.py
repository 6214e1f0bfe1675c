from .base import GroupFormatter

class EjudgeFormatter(GroupFormatter):
    """
    Renders valuer group blocks followed by the commented [problem] settings
    ready to be pasted into the contest configuration.
    """
    def format(self, groups, command_line: list[str]) -> str:
        result = f"# command line: {' '.join(command_line)}\n"

        for group in groups:
            result += self.format_group(group)

        result += "# [problem]\n"
        result += f"# full_score = {groups.total_score}\n"
        result += f'# open_tests = "{groups.open_tests}"\n'
        result += f'# final_open_tests = "{groups.final_open_tests}"\n'
        result += f'# test_score_list = "{" ".join(map(str, groups.test_scores))}"\n'
        return result

    def format_group(self, group) -> str:
        result = f"group {group.serial} {{\n"
        result += f"    tests {group.tests};\n"

        if group.is_by_test:
            result += f"    test_score {group.test_score};\n"
        else:
            result += f"    score {group.score};\n"

        if not group.is_samples:
            comment = self.options.get('requires_comment')
            result += f"    requires 0; # {comment}\n" if comment else "    requires 0;\n"

        if not group.is_first_fail:
            result += "    test_all;\n"

        if not group.is_samples:
            result += "    stat_to_users;\n"

        result += "}\n\n"
        return result
