# errors.py
# Exceptions raised inside the engine; generate() turns them into a Result.

__all__ = ["SchedulePlannerError", "MalformedInputError", "GenerationCancelled"]


class SchedulePlannerError(Exception):
    """Base class for everything the engine raises."""


class MalformedInputError(SchedulePlannerError, ValueError):
    """The catalog snapshot or the selection is structurally invalid."""


class GenerationCancelled(SchedulePlannerError):
    """The caller asked the running search to stop."""

    def __init__(self, nodes_visited: int = 0):
        super().__init__(f"generation cancelled after {nodes_visited} visited nodes")
        self.nodes_visited = nodes_visited
