import json

from .base import GroupFormatter

class JsonFormatter(GroupFormatter):
    """
    Renders the same information as the ejudge formatter as a JSON document
    for consumption by other tools.
    """
    def format(self, groups, command_line: list[str]) -> str:
        document = {
            "command_line": list(command_line),
            "groups": [self.describe_group(group) for group in groups],
            "problem": {
                "full_score": groups.total_score,
                "open_tests": groups.open_tests,
                "final_open_tests": groups.final_open_tests,
                "test_score_list": groups.test_scores,
            },
        }
        return json.dumps(document, indent=4) + "\n"

    @staticmethod
    def describe_group(group) -> dict:
        return {
            "serial": group.serial,
            "kind": group.KIND,
            "first_test": group.first_test,
            "last_test": group.last_test,
            "score": group.score,
            "test_score": group.test_score if group.is_by_test else None,
            "hidden": group.is_hidden,
            "by_test": group.is_by_test,
            "first_fail": group.is_first_fail,
            "total_only": group.is_total_only,
            "visibility": group.visibility,
        }
