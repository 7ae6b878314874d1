"""
Pytest configuration and shared fixtures for the Game of Life test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'gameoflife' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gameoflife.core.simulation_engine import SimulationEngine  # noqa: E402


BLINKER_HORIZONTAL = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
]


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_life_config_dict():
    """
    Fixture providing a complete valid engine configuration dictionary.
    """
    return {
        "grid": {"rows": 12, "cols": 20, "alive_probability": 0.25},
        "seed": 1234,
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_life_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_life_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def engine():
    """Uninitialized engine with a fixed seed."""
    return SimulationEngine(seed=42)


@pytest.fixture
def blinker_engine(engine):
    """Engine loaded with a horizontal blinker in the middle of a 5x5 grid."""
    engine.load(BLINKER_HORIZONTAL)
    return engine


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
