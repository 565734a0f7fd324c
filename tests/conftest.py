"""Shared fixtures for the easymetro test-suite."""

from __future__ import annotations

import pytest

from easymetro import parse_lines_spec
from easymetro.config import reset_config
from easymetro.container import reset_container

#                    Line B
#
#                      B1
#                      B2    C9
# Line A      A1 A2 A3 AB A5 AC A7
#                      B4    C7
#                      B5    C6
# Line C         C1 C2 BC C4 C5
#                      B7
SAMPLE_SPEC = """A: A1, A2, A3, AB, A5, AC, A7
B: B1, B2, AB, B4, B5, BC, B7
C: C1, C2, BC, C4, C5, C6, C7, AC, C9"""


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def sample_spec():
    return SAMPLE_SPEC


@pytest.fixture
def sample_network():
    return parse_lines_spec(SAMPLE_SPEC)