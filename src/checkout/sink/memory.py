"""Memory sink: records emitted messages for testing."""

from checkout.sink.port import OutputSink


class MemorySink(OutputSink):
    """Sink that records messages in memory for test assertions."""

    def __init__(self):
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last_message(self) -> str | None:
        return self.messages[-1] if self.messages else None

    def reset(self):
        """Clear recorded messages (useful between tests)."""
        self.messages.clear()
