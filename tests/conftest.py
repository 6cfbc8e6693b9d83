import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import hug_grid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from hug_grid.core.models import BreakpointContext
from hug_grid.layout import HugConfig


# Common test fixtures
@pytest.fixture
def breakpoints():
    """Return the default breakpoint order."""
    return ("base", "sm", "md", "lg", "xl")


@pytest.fixture
def hug_config():
    """Config with md gap missing so md inherits the base gap."""
    return HugConfig(
        layout_max="1280px",
        gaps={"base": "4", "lg": "12"},
        columns={"base": 4, "md": 8, "lg": 12},
    )


@pytest.fixture
def context_factory(breakpoints):
    """Factory to create breakpoint contexts over the default order."""
    def _create(current: str):
        return BreakpointContext.create(current, breakpoints)
    return _create
