"""
Pytest configuration for pathways tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from psyche.pathways.config import reset_config  # noqa: E402
from psyche.pathways.state import IndividualState  # noqa: E402
from psyche.pathways.templates import reset_templates  # noqa: E402

CONFIG_DIR = project_root / "psyche" / "pathways" / "data"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def clean_globals():
    """Every test starts from the default config and template registry."""
    reset_config()
    reset_templates()
    yield
    reset_config()
    reset_templates()


@pytest.fixture
def zero_state():
    """Fresh all-zero state."""
    return IndividualState.zeroed()


@pytest.fixture
def config_dir():
    return CONFIG_DIR
