import os

import pytest

from py_shfuncs.terminal import Terminal


def fake_tput(term, args):
    return "<" + " ".join(args) + ">"


@pytest.fixture
def term():
    """A colour-capable terminal whose escape codes are readable markers."""
    return Terminal(term="xterm", tput=fake_tput)


@pytest.fixture
def dumb():
    return Terminal(term="dumb", tput=fake_tput)


@pytest.fixture(autouse=True)
def restore_umask():
    previous = os.umask(0)
    os.umask(previous)
    yield
    os.umask(previous)
