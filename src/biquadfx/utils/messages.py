# src/biquadfx/utils/messages.py
import sys
from enum import Enum


class Severity(Enum):
    WARNING = "Warning"
    DEBUG_WARNING = "Debug warning"
    STATUS = "Status"


class WarningSink:
    """
    Receives every non-fatal message produced by the filters.
    The default sink prints to stderr, one line per message.
    """
    def __init__(self, stream=None):
        self.stream = stream

    def emit_warning(self, message, severity=Severity.WARNING):
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"{severity.value}: {message}", file=stream)


class RecordingSink(WarningSink):
    """Keeps messages in memory instead of printing them."""
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit_warning(self, message, severity=Severity.WARNING):
        self.messages.append((message, severity))

    def clear(self):
        self.messages = []

    def __len__(self):
        return len(self.messages)
