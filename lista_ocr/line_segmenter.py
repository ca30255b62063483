"""
Line segmentation for OCR'd shopping lists.

Splits the raw OCR text into item tokens, strips bullets and line numbering,
and separates an optional leading quantity from the item name.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .config import CorrectorConfig, DEFAULT_CONFIG

# Item separators inside an OCR'd line
DELIMITERS = ("\n", ",", ";")
DELIMITER_PATTERN = re.compile("|".join(re.escape(d) for d in DELIMITERS))

# Bullets, numbering and stray punctuation OCR leaves at the start of a line
LEADING_NOISE_PATTERN = re.compile(r"^[-.*• 0-9)\]]+")

# A bare number at the end of the noise run, e.g. "2 " in "2 Arroz"
BARE_QUANTITY_PATTERN = re.compile(r"(?:^| )([0-9]+) +$")

# OCR confuses these letters with digits inside quantities
QUANTITY_LETTER_FIXES = str.maketrans({"l": "1", "L": "1", "o": "0", "O": "0"})

DEFAULT_QUANTITY = "1"


@dataclass(frozen=True)
class CandidateItem:
    """A segmented (quantity, name) pair before dictionary correction."""
    quantity: str
    name: str


def split_tokens(raw_text: str) -> List[str]:
    """Split raw OCR text on newlines, commas and semicolons, in source order."""
    return DELIMITER_PATTERN.split(raw_text)


def strip_leading_noise(token: str) -> str:
    """
    Trim whitespace and remove leading bullets and line numbering.

    "- 3) Tomate" -> "Tomate", "1. Leite" -> "Leite", "• Arroz" -> "Arroz".
    A bare number followed by a word is a quantity, not numbering, and is
    kept with a single space after it: "2  Arroz" -> "2 Arroz".
    """
    text = token.strip()
    match = LEADING_NOISE_PATTERN.match(text)
    if not match:
        return text

    noise = match.group(0)
    remainder = text[match.end():]

    quantity = BARE_QUANTITY_PATTERN.search(noise)
    if quantity and remainder:
        return quantity.group(1) + " " + remainder
    return remainder


def normalize_quantity_word(word: str) -> str:
    """Undo l->1 and o->0 misreads (either case) in a would-be quantity."""
    return word.translate(QUANTITY_LETTER_FIXES)


def split_quantity(text: str) -> Tuple[str, str]:
    """
    Separate a leading quantity from the item name.

    The first word counts as a quantity only when, after letter fixes, it is
    all digits AND more text follows it. The name is never letter-fixed.

    Returns:
        Tuple of (quantity, name)
    """
    parts = text.split(" ", 1)
    if len(parts) < 2:
        return DEFAULT_QUANTITY, text

    first_word, rest = parts
    possible_quantity = normalize_quantity_word(first_word)
    if possible_quantity and possible_quantity.isdecimal():
        return possible_quantity, rest.lstrip(" ")

    return DEFAULT_QUANTITY, text


def segment(raw_text: str, config: CorrectorConfig = DEFAULT_CONFIG) -> List[CandidateItem]:
    """
    Segment raw OCR text into candidate items.

    Args:
        raw_text: Multi-line plain text from the OCR engine
        config: Provides the minimum token length

    Returns:
        CandidateItems in source order. Empty or delimiter-only input gives
        an empty list.
    """
    candidates = []
    for token in split_tokens(raw_text):
        text = strip_leading_noise(token)
        # Too short to be an item, usually stray punctuation
        if len(text) <= config.min_token_length:
            continue
        quantity, name = split_quantity(text)
        candidates.append(CandidateItem(quantity=quantity, name=name))
    return candidates


def segment_lines(lines: Iterable[str], config: CorrectorConfig = DEFAULT_CONFIG) -> List[CandidateItem]:
    """Segment OCR output delivered as separate lines (e.g. one per text line)."""
    candidates = []
    for line in lines:
        candidates.extend(segment(line, config))
    return candidates
