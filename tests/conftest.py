import os
import sys

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chromastops import Gradient  # noqa: E402


@pytest.fixture
def red_blue():
    return Gradient.from_colors(["red", "blue"])


@pytest.fixture
def red_yellow_blue():
    return Gradient.from_stops([
        {"color": "red", "pos": 0},
        {"color": "yellow", "pos": 0.25},
        {"color": "blue", "pos": 1},
    ])


@pytest.fixture
def rainbow():
    return Gradient.from_colors(["red", "yellow", "lime", "cyan", "blue", "magenta"])
