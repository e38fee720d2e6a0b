"""Output sink factory.

Provides get_sink() / set_sink() to swap implementations:
- ConsoleSink for interactive runs (default)
- MemorySink for tests

The default can be chosen with the CHECKOUT_SINK environment variable
("console" or "memory").
"""

import os

from checkout.sink.port import OutputSink

_current_sink: OutputSink | None = None


def get_sink() -> OutputSink:
    """Return the current output sink. Defaults to CHECKOUT_SINK, else ConsoleSink."""
    global _current_sink
    if _current_sink is None:
        kind = os.environ.get("CHECKOUT_SINK", "console")
        if kind == "console":
            from checkout.sink.console import ConsoleSink

            _current_sink = ConsoleSink()
        elif kind == "memory":
            from checkout.sink.memory import MemorySink

            _current_sink = MemorySink()
        else:
            raise ValueError(f"Unknown output sink: {kind}")
    return _current_sink


def set_sink(sink: OutputSink) -> None:
    """Override the active output sink (useful for tests)."""
    global _current_sink
    _current_sink = sink


def reset_sink() -> None:
    """Reset to default sink."""
    global _current_sink
    _current_sink = None


class SinkEmitter:
    """Base for strategies that report their effect through an output sink.

    A sink passed at construction wins; otherwise the active sink is looked
    up on every emit, so set_sink() affects already-built strategies.
    """

    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink

    @property
    def sink(self) -> OutputSink:
        return self._sink if self._sink is not None else get_sink()

    def emit(self, message: str) -> None:
        self.sink.emit(message)
