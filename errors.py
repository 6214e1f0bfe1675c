class GroupsError(Exception):
    """
    Base class for all failures raised while validating a test directory
    and generating group descriptions
    """
    pass


class UsageError(GroupsError):
    """
    The command line does not fit the discovered test directory
    """
    pass


class LayoutError(GroupsError):
    """
    A directory is missing, has the wrong type or the test root contains unexpected entries
    """
    pass


class SpecParseError(GroupsError):
    """
    A number could not be parsed (scoring spec, subtask suffix or test name)
    """
    pass


class ContentError(GroupsError):
    """
    Required tests or test files are missing
    """
    pass


class StructureError(GroupsError):
    """
    Test numbers do not form one contiguous range starting at 1
    """
    pass
