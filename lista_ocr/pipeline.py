"""
Recognition pipeline: raw OCR text -> corrected shopping-list items.

Line segmentation feeds each candidate name through the grocery corrector and
drops anything that ends up without a single letter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .config import CorrectorConfig, DEFAULT_CONFIG
from .grocery_corrector import correct_item_name
from .line_segmenter import CandidateItem, segment, segment_lines

ITEMS_READ_MESSAGE = "{count} itens lidos!"
NO_ITEMS_MESSAGE = "Não identifiquei itens."


@dataclass(frozen=True)
class CorrectedItem:
    """A candidate item after dictionary correction."""
    quantity: str
    name: str
    original_name: str = ""
    was_corrected: bool = False
    distance: Optional[int] = None

    def as_pair(self) -> Tuple[str, str]:
        return self.quantity, self.name


@dataclass
class RecognitionResult:
    """Items recognized from one OCR pass."""
    items: List[CorrectedItem] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def feedback_message(self) -> str:
        """Short status line for the user, as shown after a scan."""
        if self.count > 0:
            return ITEMS_READ_MESSAGE.format(count=self.count)
        return NO_ITEMS_MESSAGE

    def pairs(self) -> List[Tuple[str, str]]:
        return [item.as_pair() for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "message": self.feedback_message,
            "items": [
                {
                    "quantity": item.quantity,
                    "name": item.name,
                    "original_name": item.original_name,
                    "was_corrected": item.was_corrected,
                    "distance": item.distance,
                }
                for item in self.items
            ],
        }


def has_letters(text: str) -> bool:
    """True when text contains at least one alphabetic character."""
    return any(ch.isalpha() for ch in text)


def correct_candidates(
    candidates: Iterable[CandidateItem],
    config: CorrectorConfig = DEFAULT_CONFIG,
    verbose: bool = False,
) -> RecognitionResult:
    """Correct candidate names and keep those that still contain letters."""
    result = RecognitionResult()

    for i, candidate in enumerate(candidates):
        corrected, was_corrected, distance = correct_item_name(candidate.name, config)

        if not has_letters(corrected):
            if verbose:
                print(f"[Skip] Item {i}: '{corrected}' has no letters")
            continue

        if verbose and was_corrected:
            print(f"[Correct] Item {i}: '{candidate.name}' -> '{corrected}' (distance={distance})")

        result.items.append(CorrectedItem(
            quantity=candidate.quantity,
            name=corrected,
            original_name=candidate.name,
            was_corrected=was_corrected,
            distance=distance,
        ))

    return result


def recognize_items(
    raw_text: Union[str, Iterable[str]],
    config: CorrectorConfig = DEFAULT_CONFIG,
    verbose: bool = False,
) -> RecognitionResult:
    """
    Turn raw OCR output into shopping-list items.

    Args:
        raw_text: The OCR text blob, or an iterable of recognized lines
        config: Segmentation and correction thresholds
        verbose: Print one trace line per correction or skipped item

    Returns:
        RecognitionResult with the items in source order. Never raises on
        malformed text; the worst case is an empty result.
    """
    if isinstance(raw_text, str):
        candidates = segment(raw_text, config)
    else:
        candidates = segment_lines(raw_text, config)

    if verbose:
        print(f"[Segment] {len(candidates)} candidate(s)")

    result = correct_candidates(candidates, config, verbose=verbose)

    if verbose:
        print(f"[Pipeline] {result.feedback_message}")

    return result
