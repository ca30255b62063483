"""
Pytest configuration and shared fixtures for the Lista Fácil OCR tests.

Usage:
    pytest lista_ocr/tests/ -v
    pytest lista_ocr/tests/test_corrector.py -v
    pytest lista_ocr/tests/ -m "not slow" -v
"""

import sys
from pathlib import Path
import pytest

# Add repository root for imports when the package is not installed
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Sample OCR Output
# =============================================================================

# Typical ML Kit output for a handwritten list photographed at an angle
SAMPLE_OCR_TEXT = """- 1) Abacatee
2 Arroz, Feijao; l Leite
• Tomate
* Detergemte
lo Ovos
xy
???"""


@pytest.fixture
def sample_ocr_text() -> str:
    return SAMPLE_OCR_TEXT


# =============================================================================
# Corrector Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def correct():
    """The plain correction function (name -> name)."""
    from lista_ocr.grocery_corrector import correct
    return correct


@pytest.fixture(scope="session")
def correct_item_name():
    """The diagnostic correction function (name -> (name, was_corrected, distance))."""
    from lista_ocr.grocery_corrector import correct_item_name
    return correct_item_name


@pytest.fixture(scope="session")
def grocery_items():
    """Built-in dictionary terms in scan order."""
    from lista_ocr.grocery_corrector import GROCERY_ITEMS
    return GROCERY_ITEMS


# =============================================================================
# Environment Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's LISTA_OCR_CONFIG from leaking into tests."""
    from lista_ocr.config import CONFIG_ENV_VAR
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their names."""
    for item in items:
        if "performance" in item.name or "speed" in item.name:
            item.add_marker(pytest.mark.slow)
