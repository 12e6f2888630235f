import io

import pytest
from rich.console import Console

from jsreader.report import Reporter


@pytest.fixture
def anyio_backend():
    return "asyncio"


class RecordingReporter(Reporter):
    def __init__(self, **kwargs):
        self.buffer = io.StringIO()
        super().__init__(console=Console(file=self.buffer, highlight=False, soft_wrap=True, color_system=None), **kwargs)
        self.findings = []
        self.errors = []

    def finding(self, f):
        self.findings.append(f)
        super().finding(f)

    def error(self, source, msg):
        self.errors.append((source, msg))
        super().error(source, msg)

    @property
    def text(self):
        return self.buffer.getvalue()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def make_reporter():
    return RecordingReporter
