# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

# ✅ Handwriting feature codes (all normalized to 0-1)
FEATURE_NAMES = {
    "SLN": "Slant Angle",
    "WSP": "Word Spacing",
    "LSZ": "Letter Size",
    "BLN": "Baseline Stability",
    "MLM": "Left Margin",
    "PRT": "Pressure",
    "LSP": "Letter Spacing",
    "LCR": "Curvature",
    "CNT": "Connectedness",
    "RHM": "Rhythm",
}

FEATURE_CODES = tuple(FEATURE_NAMES.keys())

# ✅ Personality trait codes (all normalized to 0-1)
TRAIT_NAMES = {
    "CNF": "Confidence",
    "EMX": "Emotional Expression",
    "CRT": "Creativity",
    "DSC": "Discipline",
    "SOC": "Social Openness",
    "NRG": "Mental Energy",
    "INT": "Intuition",
    "IND": "Independence",
}

TRAIT_CODES = tuple(TRAIT_NAMES.keys())

TRAIT_COLORS = {
    "CNF": "#3B82F6",  # Blue
    "EMX": "#EC4899",  # Pink
    "CRT": "#8B5CF6",  # Purple
    "DSC": "#10B981",  # Green
    "SOC": "#F59E0B",  # Orange
    "NRG": "#EF4444",  # Red
    "INT": "#06B6D4",  # Cyan
    "IND": "#84CC16",  # Lime
}

TRAIT_ICONS = {
    "CNF": "star",
    "EMX": "heart",
    "CRT": "bulb",
    "DSC": "checkmark-circle",
    "SOC": "people",
    "NRG": "flash",
    "INT": "eye",
    "IND": "person",
}

# Bump whenever a weight in TRAIT_WEIGHTS changes; stored history is
# interpreted against the version that produced it.
TRAIT_FORMULA_VERSION = 1

# Trend deadband: |change %| below this is reported as "stable"
TREND_STABLE_THRESHOLD_PCT = 2.0

TRAITS_SOURCE_VISION = "vision"
TRAITS_SOURCE_DERIVED = "derived"
