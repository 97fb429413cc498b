import logging
import threading

import pytest

from mathml_oracle import TypesetResult


class StubOracle:
    """Returns canned MathML; any math listed in failures is reported as an error"""

    def __init__(self, mml='<mi>x</mi><mo>^</mo><mn>2</mn>', failures=()):
        self.mml = mml
        self.failures = set(failures)
        self.calls = []
        self._lock = threading.Lock()

    def typeset(self, math, format):
        with self._lock:
            self.calls.append((math, format))
        if math in self.failures:
            return TypesetResult(errors=[f"Undefined control sequence in {math}"])
        if callable(self.mml):
            return TypesetResult(mml=self.mml(math, format))
        return TypesetResult(mml=self.mml)


@pytest.fixture
def stub_oracle():
    return StubOracle()


@pytest.fixture
def echo_oracle():
    """Echoes the source and format so every replacement is traceable to its span"""
    return StubOracle(mml=lambda math, format: f'<mtext>{format}:{math}</mtext>')


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
