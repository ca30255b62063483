"""
Configuration for the list recognition engine.

Defaults live in module-level constants. A YAML file can override them key by
key; its path is taken from the CLI ``--config`` flag or from the
LISTA_OCR_CONFIG environment variable.

Example config file:

    min_token_length: 2
    min_name_length: 2
    tolerance_tiers:
      - [4, 1]
      - [7, 2]
    long_word_tolerance: 3
    extra_terms:
      - "Leite Condensado"
      - "Creme de Leite"
"""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Tuple

import yaml

# Environment variable naming a default config file
CONFIG_ENV_VAR = 'LISTA_OCR_CONFIG'

# Tokens at or below this length are dropped by the segmenter
MIN_TOKEN_LENGTH = 2

# Names at or below this length are never fuzzy matched
MIN_NAME_LENGTH = 2

# (max term length, tolerance) pairs, checked in order
TOLERANCE_TIERS: Tuple[Tuple[int, int], ...] = ((4, 1), (7, 2))

# Tolerance for terms longer than the last tier
LONG_WORD_TOLERANCE = 3


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""
    pass


@dataclass(frozen=True)
class CorrectorConfig:
    """Tunable thresholds for segmentation and correction."""
    min_token_length: int = MIN_TOKEN_LENGTH
    min_name_length: int = MIN_NAME_LENGTH
    tolerance_tiers: Tuple[Tuple[int, int], ...] = TOLERANCE_TIERS
    long_word_tolerance: int = LONG_WORD_TOLERANCE
    extra_terms: Tuple[str, ...] = field(default_factory=tuple)


DEFAULT_CONFIG = CorrectorConfig()


def _as_non_negative_int(key: str, value) -> int:
    # bool is an int subclass; "true" is not a length
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def _parse_tiers(value) -> Tuple[Tuple[int, int], ...]:
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigError(f"'tolerance_tiers' must be a non-empty list of [length, tolerance] pairs, got {value!r}")

    tiers = []
    previous_length = -1
    for pair in value:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ConfigError(f"Invalid tolerance tier {pair!r}, expected [length, tolerance]")
        max_length = _as_non_negative_int('tolerance_tiers', pair[0])
        tolerance = _as_non_negative_int('tolerance_tiers', pair[1])
        if max_length <= previous_length:
            raise ConfigError("'tolerance_tiers' lengths must be strictly increasing")
        previous_length = max_length
        tiers.append((max_length, tolerance))
    return tuple(tiers)


def _parse_terms(value) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"'extra_terms' must be a list of strings, got {value!r}")
    terms = []
    for term in value:
        if not isinstance(term, str) or not term.strip():
            raise ConfigError(f"Invalid dictionary term {term!r}")
        terms.append(term.strip())
    return tuple(terms)


_PARSERS = {
    'min_token_length': lambda v: _as_non_negative_int('min_token_length', v),
    'min_name_length': lambda v: _as_non_negative_int('min_name_length', v),
    'tolerance_tiers': _parse_tiers,
    'long_word_tolerance': lambda v: _as_non_negative_int('long_word_tolerance', v),
    'extra_terms': _parse_terms,
}


def config_from_dict(data: dict, base: CorrectorConfig = DEFAULT_CONFIG) -> CorrectorConfig:
    """Override ``base`` with the values in ``data``.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(CorrectorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    overrides = {key: _PARSERS[key](value) for key, value in data.items()}
    return replace(base, **overrides)


def load_config(path: Optional[str] = None) -> CorrectorConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to a YAML file. When None, LISTA_OCR_CONFIG is consulted;
            when that is unset too, the defaults are returned.

    Returns:
        CorrectorConfig with file values applied over the defaults

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds invalid values
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return DEFAULT_CONFIG

    config_path = Path(path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # Empty file means defaults
    if data is None:
        return DEFAULT_CONFIG

    return config_from_dict(data)
