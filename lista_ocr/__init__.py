"""
Lista Fácil OCR text-correction engine.

This package turns raw OCR text from a photographed shopping list into
structured list items:
- config: Thresholds, YAML loading
- line_segmenter: Token splitting, noise stripping, quantity detection
- grocery_corrector: Dictionary and edit-distance correction
- pipeline: End-to-end recognition with user feedback
- shopping_list: In-memory list the recognized items are added to
"""

# Configuration
from .config import (
    ConfigError,
    CorrectorConfig,
    DEFAULT_CONFIG,
    load_config,
)

# Segmentation
from .line_segmenter import (
    CandidateItem,
    segment,
    segment_lines,
)

# Correction
from .grocery_corrector import (
    GROCERY_ITEMS,
    correct,
    correct_item_name,
    find_best_match,
    levenshtein_distance,
    tolerance_for,
)

# Pipeline
from .pipeline import (
    CorrectedItem,
    RecognitionResult,
    recognize_items,
)

# Shopping list
from .shopping_list import ShoppingItem, ShoppingList


__all__ = [
    # Configuration
    "ConfigError",
    "CorrectorConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Segmentation
    "CandidateItem",
    "segment",
    "segment_lines",
    # Correction
    "GROCERY_ITEMS",
    "correct",
    "correct_item_name",
    "find_best_match",
    "levenshtein_distance",
    "tolerance_for",
    # Pipeline
    "CorrectedItem",
    "RecognitionResult",
    "recognize_items",
    # Shopping list
    "ShoppingItem",
    "ShoppingList",
]
