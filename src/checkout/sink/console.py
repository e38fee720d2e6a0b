"""Console sink: writes confirmations to standard output."""

import sys

from checkout.sink.port import OutputSink


class ConsoleSink(OutputSink):
    def __init__(self, stream=None):
        self.stream = stream

    def emit(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)
