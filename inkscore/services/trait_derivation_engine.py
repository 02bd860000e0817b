# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Any, Dict, Iterable, Optional, Tuple

from inkscore.utils.trait_constants import (
    TRAIT_CODES,
    TRAITS_SOURCE_DERIVED,
    TRAITS_SOURCE_VISION,
)
from inkscore.utils.trait_validation import (
    ValidationError,
    validate_features,
    validate_traits,
)


def _slant_deviation(features: Dict[str, float]) -> float:
    # 0 for upright writing, 1 for a fully left or right slant
    return abs(features["SLN"] - 0.5) * 2


# Formula version 1. Changing a weight silently reinterprets stored
# history, so bump TRAIT_FORMULA_VERSION alongside any edit here.
TRAIT_WEIGHTS = {
    "CNF": lambda f: 0.6 * f["LSZ"] + 0.4 * f["PRT"],
    "EMX": lambda f: 0.7 * _slant_deviation(f) + 0.3 * f["RHM"],
    "CRT": lambda f: 0.6 * f["LCR"] + 0.4 * (1 - f["BLN"]),
    "DSC": lambda f: 0.6 * f["BLN"] + 0.4 * f["MLM"],
    "SOC": lambda f: 0.5 * f["WSP"] + 0.3 * f["LSP"] + 0.2 * _slant_deviation(f),
    "NRG": lambda f: 0.6 * f["PRT"] + 0.4 * f["RHM"],
    "INT": lambda f: 0.6 * (1 - f["CNT"]) + 0.4 * f["LCR"],
    "IND": lambda f: 0.5 * (1 - f["CNT"]) + 0.5 * (1 - f["WSP"]),
}


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def derive_traits(features: Any) -> Dict[str, float]:
    """
    Maps the ten handwriting features to the eight personality traits.

    Raises ValidationError before computing anything if a feature is missing,
    non-numeric, or outside [0, 1]. Every trait is clamped to [0, 1].
    """
    validated = validate_features(features)
    return {code: _clamp(TRAIT_WEIGHTS[code](validated)) for code in TRAIT_CODES}


def calculate_overall_score(traits: Any) -> float:
    """Arithmetic mean of the eight trait scores."""
    validated = validate_traits(traits)
    return sum(validated.values()) / len(validated)


def resolve_traits(features: Any, traits: Optional[Any] = None) -> Tuple[Dict[str, float], str]:
    """
    Returns (traits, source). Vision-supplied traits win when present;
    otherwise they are derived from the features. Features are validated
    either way.
    """
    validate_features(features)

    if traits is not None:
        return validate_traits(traits), TRAITS_SOURCE_VISION

    return derive_traits(features), TRAITS_SOURCE_DERIVED


def average_traits(trait_sets: Iterable[Any]) -> Dict[str, float]:
    """
    Per-trait mean across a collection of trait payloads.
    Used to build daily personality snapshots.
    """
    validated = [validate_traits(t) for t in trait_sets]
    if not validated:
        raise ValidationError("traits", [], "at least one trait set is required")

    return {
        code: sum(t[code] for t in validated) / len(validated)
        for code in TRAIT_CODES
    }
