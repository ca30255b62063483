"""
Grocery Item Corrector - Dictionary fuzzy matching for OCR'd shopping lists.

PRINCIPLE: The output name is either the input verbatim or an exact dictionary
entry. Nothing in between.

Key Design Decisions:
1. ORDERED DICTIONARY: Terms are scanned in declaration order; ties go to the first
2. PER-TERM TOLERANCE: The allowed edit distance scales with the dictionary term's length
3. SHORT INPUTS UNTOUCHED: Names of 2 characters or fewer are never corrected
4. CASE-INSENSITIVE: Comparison is lowercase, the returned term keeps its own casing
"""

from functools import lru_cache
from typing import Dict, List, Optional, Set, Tuple

from rapidfuzz.distance import Levenshtein

from .config import CorrectorConfig, DEFAULT_CONFIG

# =============================================================================
# SUPERMARKET DICTIONARY (pt-BR, organized by aisle)
# Order matters: when two terms are equally close, the earlier one wins.
# =============================================================================

GROCERY_CATEGORIES: Dict[str, List[str]] = {
    # BÁSICOS
    "basicos": [
        "Arroz", "Feijão", "Açúcar", "Café", "Leite", "Manteiga", "Pão", "Macarrão", "Óleo",
        "Sal", "Farinha", "Ovos", "Queijo", "Presunto", "Requeijão", "Iogurte", "Mel",
        "Azeite", "Vinagre", "Molho", "Maionese", "Ketchup", "Mostarda", "Tempero", "Alho",
        "Chocolate", "Achocolatado", "Biscoito", "Bolacha", "Torrada", "Pipoca", "Toddy",
        "Nescal", "Ovomaltine", "Geleia", "Miojo", "Farofa", "Farofa Pronta", "Coador",
        "Coador de Café", "Melitta", "Granola", "Chá", "Mate", "Chá Mate", "Chá Mate Leão", "Chia",
        "Torrada", "Torradas", "Pão de Queijo", "Penne",
    ],

    # HORTIFRUTI
    "hortifruti": [
        "Abacate", "Abacaxi", "Abóbora", "Abobrinha", "Alface", "Alho", "Banana", "Batata",
        "Beterraba", "Brócolis", "Cebola", "Cenoura", "Couve", "Espinafre", "Fruta", "Frutas",
        "Goiaba", "Laranja", "Limão", "Maçã", "Mamão", "Manga", "Maracujá", "Melancia", "Milho",
        "Melão", "Morango", "Pera", "Pimentão", "Repolho", "Rúcula", "Tomate", "Uva",
        "Vagem", "Cheiro Verde", "Salsinha", "Cebolinha", "Verduras", "Folhas", "Legumes",
    ],

    # CARNES E FRIOS
    "carnes": [
        "Carne", "Frango", "Peixe", "Carne Moída", "Bife", "Linguiça", "Salsicha", "Bacon",
        "Mortadela", "Peito de Peru", "Salame", "Hambúrguer", "Nugets", "Espetinho",
    ],

    # LIMPEZA E HIGIENE
    "limpeza": [
        "Detergente", "Sabão", "Sabão em Pó", "Amaciante", "Água Sanitária", "Desinfetante",
        "Esponja", "Bombril", "Lã de Aço", "Álcool", "Papel Higiênico", "Papel Toalha",
        "Shampoo", "Condicionador", "Sabonete", "Pasta de Dente", "Fio Dental", "Desodorante",
        "Cotonete", "Algodão", "Absorvente", "Sapólio", "Azulim", "Veja", "Veja Multi Uso",
        "Desodorante Dove Man Care", "OB", "O.B.", "Mods", "Gilette", "Barbeador",
        "Lâmina de Barbear", "Loção pós Barba", "Phebo", "Pinça", "Cortador de Unha", "Esmalte",
        "Tinta", "Tinta para Cabelo", "Tinta p/ Cabelo", "Tinta Cabelo", "Espelho",
    ],

    # BEBIDAS E OUTROS
    "bebidas": [
        "Água", "Suco", "Refrigerante", "Cerveja", "Vinho", "Gelo", "Fósforo", "Vela",
        "Pilha", "Ração", "Saco de Lixo", "Heineken", "Pepsi", "Coca", "Fanta", "Fanta Uva",
        "Barrinha de cereal", "Barrinha", "Proteína", "Água com Gás", "Água c/ Gás", "Energético",
    ],
}

# Flatten all items into a single ordered tuple
GROCERY_ITEMS: Tuple[str, ...] = tuple(
    item for items in GROCERY_CATEGORIES.values() for item in items
)

# Build lowercase lookup set
GROCERY_SET: Set[str] = {item.lower() for item in GROCERY_ITEMS}


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate the Levenshtein (edit) distance between two strings.

    Insertions, deletions and substitutions each cost 1; transpositions
    count as two edits. Comparison is case-sensitive.
    """
    return Levenshtein.distance(s1, s2)


def tolerance_for(term: str, config: CorrectorConfig = DEFAULT_CONFIG) -> int:
    """
    Maximum edit distance accepted for a dictionary term.

    Derived from the TERM's length, not the input's, so that short terms
    like "Sal" are not matched by inputs that differ in half their letters:
    - length <= 4: 1 edit
    - length <= 7: 2 edits
    - longer:      3 edits
    """
    term_len = len(term)
    for max_length, tolerance in config.tolerance_tiers:
        if term_len <= max_length:
            return tolerance
    return config.long_word_tolerance


@lru_cache(maxsize=8)
def _dictionary(extra_terms: Tuple[str, ...]) -> Tuple[Tuple[str, str], ...]:
    """(term, lowercase term) pairs in scan order. Built-in terms come first."""
    return tuple((term, term.lower()) for term in GROCERY_ITEMS + extra_terms)


def dictionary_terms(config: CorrectorConfig = DEFAULT_CONFIG) -> Tuple[str, ...]:
    """All dictionary terms in scan order, including configured extras."""
    return tuple(term for term, _ in _dictionary(tuple(config.extra_terms)))


def is_known_term(text: str, config: CorrectorConfig = DEFAULT_CONFIG) -> bool:
    """Check if text is already a dictionary term (case-insensitive)."""
    text_lower = text.lower()
    if text_lower in GROCERY_SET:
        return True
    return any(text_lower == term.lower() for term in config.extra_terms)


def find_best_match(
    text: str, config: CorrectorConfig = DEFAULT_CONFIG
) -> Tuple[Optional[str], Optional[int]]:
    """
    Find the closest dictionary term within that term's tolerance.

    Returns:
        Tuple of (term or None, distance or None)
    """
    if len(text) <= config.min_name_length:
        return None, None

    text_lower = text.lower()

    best_match = None
    smallest_distance = None

    for term, term_lower in _dictionary(tuple(config.extra_terms)):
        tolerance = tolerance_for(term, config)
        # Anything past the cutoff comes back as tolerance + 1
        distance = Levenshtein.distance(text_lower, term_lower, score_cutoff=tolerance)
        if distance > tolerance:
            continue

        if smallest_distance is None or distance < smallest_distance:
            smallest_distance = distance
            best_match = term
            if distance == 0:
                break

    return best_match, smallest_distance


def correct_item_name(
    text: str, config: CorrectorConfig = DEFAULT_CONFIG
) -> Tuple[str, bool, Optional[int]]:
    """
    Attempt to correct an OCR'd item name to a known dictionary term.

    Args:
        text: Item name as segmented from the OCR text
        config: Thresholds and extra dictionary terms

    Returns:
        Tuple of (corrected_text, was_corrected, distance). When no term
        qualifies the input comes back verbatim with distance None.
    """
    match, distance = find_best_match(text, config)
    if match is None:
        return text, False, None
    return match, match != text, distance


def correct(text: str, config: CorrectorConfig = DEFAULT_CONFIG) -> str:
    """Simple wrapper returning only the corrected name."""
    corrected, _, _ = correct_item_name(text, config)
    return corrected
