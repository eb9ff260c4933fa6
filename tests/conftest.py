"""Test setup for confindent."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def user_source() -> str:
    """A small document with one root value and two children."""
    return "User gennyble\n\tEmail gen@nyble.dev\n\tID 256"


@pytest.fixture
def host_source() -> str:
    """A document with nested blocks, duplicate keys and a valueless key."""
    return (
        "Host example.net\n"
        "    Username gerald\n"
        "    Port 2222\n"
        "    Forward 8080\n"
        "    Forward 8443\n"
        "        Bind 127.0.0.1\n"
        "    Compression\n"
        "\n"
        "Host backup.example.net\n"
        "\tUsername root\n"
    )
