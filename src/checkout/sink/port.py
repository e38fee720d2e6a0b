"""Output sink port: abstract interface for human-readable confirmations.

Payment, delivery and notification strategies report what they did by
emitting a line of text to a sink. Tests swap in a recording sink instead
of reading standard output.
"""

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Abstract interface for output sink adapters."""

    @abstractmethod
    def emit(self, message: str) -> None:
        """Emit a single human-readable message."""
        ...
