import pytest

from helpers import FakeTerminal
from rezvan.editor import Editor


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def editor(terminal):
    return Editor(terminal=terminal)
