# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Any, List

from inkscore.schemas.analysis_schemas import TraitDisplay
from inkscore.utils.trait_constants import TRAIT_CODES, TRAIT_COLORS, TRAIT_ICONS, TRAIT_NAMES
from inkscore.utils.trait_validation import validate_traits


def _to_percent(value: float) -> int:
    # Round half up like the mobile client does (Python's round() is banker's)
    return int(value * 100 + 0.5)


def convert_traits_to_display(traits: Any) -> List[TraitDisplay]:
    """Converts 0-1 trait scores into 0-100 rows for the radar/bar charts."""
    validated = validate_traits(traits)
    return [
        TraitDisplay(
            code=code,
            name=TRAIT_NAMES[code],
            score=_to_percent(validated[code]),
            color=TRAIT_COLORS[code],
            icon=TRAIT_ICONS[code],
        )
        for code in TRAIT_CODES
    ]


def format_trait_summary(traits: Any) -> str:
    """
    Plain-text quantified summary, used as the stored summary when the
    vision service did not send a formatted one.
    """
    lines = ["📊 QUANTIFIED PERSONALITY TRAITS"]
    for row in convert_traits_to_display(traits):
        lines.append(f"• {row.name}: {row.score}%")
    return "\n".join(lines)
