from abc import ABC, abstractmethod

class GroupFormatter(ABC):
    """
    Abstract base class for all group formatters.
    Each subclass must implement the `format` method
    that takes the scored groups and returns the rendered text.
    """
    def __init__(self, options: dict = None):
        super().__init__()
        self.options = options or {}

    @abstractmethod
    def format(self, groups, command_line: list[str]) -> str:
        """
        Render the groups of a problem together with the
        command line that produced them.
        """
        raise NotImplementedError("Subclasses must implement this method")
