# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import math
from typing import Any, Dict, Iterable, Mapping

from inkscore.utils.trait_constants import FEATURE_CODES, TRAIT_CODES


class ValidationError(ValueError):
    """
    Raised when a feature/trait payload is missing a field, carries a
    non-numeric value, or a value outside [0, 1].
    Never partially applied: nothing is computed once this is raised.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {reason} (got {value!r})")

    def to_dict(self) -> dict:
        value = self.value
        if isinstance(value, float) and not math.isfinite(value):
            value = str(value)  # JSON has no NaN / inf
        elif isinstance(value, int) and not isinstance(value, bool) and abs(value) > 2 ** 53:
            value = str(value)
        elif not isinstance(value, (int, float, str, bool, type(None))):
            value = repr(value)
        return {"field": self.field, "value": value, "reason": self.reason}


def validate_unit_score(field: str, value: Any) -> float:
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, value, "must be a number")

    try:
        value = float(value)
    except OverflowError:
        # ints too large for a float are far outside [0, 1]
        raise ValidationError(field, value, "must be between 0 and 1")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(field, value, "must be a finite number")
    if value < 0.0 or value > 1.0:
        raise ValidationError(field, value, "must be between 0 and 1")
    return value


def _validate_scores(data: Any, codes: Iterable[str], prefix: str) -> Dict[str, float]:
    if hasattr(data, "model_dump"):
        data = data.model_dump(by_alias=True)

    if not isinstance(data, Mapping):
        raise ValidationError(prefix, data, "must be an object")

    validated = {}
    for code in codes:
        if code not in data or data[code] is None:
            raise ValidationError(f"{prefix}.{code}", None, "is required")
        validated[code] = validate_unit_score(f"{prefix}.{code}", data[code])
    return validated


def validate_features(features: Any) -> Dict[str, float]:
    """
    Validates a HandwritingFeatures payload and returns a plain dict of the
    ten feature codes. Unknown keys are ignored.
    """
    return _validate_scores(features, FEATURE_CODES, "features")


def validate_traits(traits: Any) -> Dict[str, float]:
    """Validates a PersonalityTraits payload (all eight codes required)."""
    return _validate_scores(traits, TRAIT_CODES, "traits")


def validate_confidence(confidence_score: Any) -> float:
    return validate_unit_score("confidence_score", confidence_score)
