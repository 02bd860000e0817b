import random

import pytest

from inkscore.services.trait_derivation_engine import (
    average_traits,
    calculate_overall_score,
    derive_traits,
    resolve_traits,
)
from inkscore.utils.trait_constants import FEATURE_CODES, TRAIT_CODES
from inkscore.utils.trait_validation import ValidationError


def random_features(rng):
    return {code: rng.random() for code in FEATURE_CODES}


# ── Derivation formulas ─────────────────────────────────────────────────

def test_reference_features_give_expected_traits(sample_features):
    traits = derive_traits(sample_features)

    assert traits["CNF"] == pytest.approx(0.8)
    assert traits["CRT"] == pytest.approx(0.16)
    assert traits["EMX"] == pytest.approx(0.15)   # upright slant, only rhythm counts
    assert traits["DSC"] == pytest.approx(0.74)
    assert traits["SOC"] == pytest.approx(0.40)
    assert traits["NRG"] == pytest.approx(0.68)
    assert traits["INT"] == pytest.approx(0.38)
    assert traits["IND"] == pytest.approx(0.50)


def test_derivation_returns_all_eight_traits(sample_features):
    assert set(derive_traits(sample_features)) == set(TRAIT_CODES)


@pytest.mark.parametrize("slant", [0.0, 1.0])
def test_full_slant_either_way_is_equally_expressive(sample_features, slant):
    features = dict(sample_features, SLN=slant)
    traits = derive_traits(features)
    # |slant - 0.5| * 2 == 1 in both directions
    assert traits["EMX"] == pytest.approx(0.7 + 0.3 * 0.5)
    assert traits["SOC"] == pytest.approx(0.25 + 0.15 + 0.2)


def test_disconnected_tight_writing_is_fully_independent(sample_features):
    features = dict(sample_features, CNT=0.0, WSP=0.0)
    assert derive_traits(features)["IND"] == pytest.approx(1.0)


@pytest.mark.parametrize("value", [0.0, 1.0])
def test_extreme_inputs_stay_in_range(value):
    features = {code: value for code in FEATURE_CODES}
    for score in derive_traits(features).values():
        assert 0.0 <= score <= 1.0


def test_random_valid_features_stay_in_range():
    rng = random.Random(7)
    for _ in range(300):
        for score in derive_traits(random_features(rng)).values():
            assert 0.0 <= score <= 1.0


def test_derivation_is_deterministic():
    rng = random.Random(11)
    features = random_features(rng)
    assert derive_traits(features) == derive_traits(dict(features))


def test_integer_feature_values_are_accepted(sample_features):
    features = dict(sample_features, PRT=1, LSZ=0)
    assert derive_traits(features)["CNF"] == pytest.approx(0.4)


def test_extra_feature_keys_are_ignored(sample_features):
    features = dict(sample_features, XYZ=42)
    assert derive_traits(features) == derive_traits(sample_features)


# ── Validation at the boundary ──────────────────────────────────────────

def test_missing_feature_names_the_field(sample_features):
    features = dict(sample_features)
    del features["RHM"]
    with pytest.raises(ValidationError) as exc:
        derive_traits(features)
    assert exc.value.field == "features.RHM"


@pytest.mark.parametrize("bad", [-0.01, 1.01, 10 ** 400, float("nan"), float("inf"), "0.5", True, None])
def test_invalid_feature_value_is_rejected(sample_features, bad):
    features = dict(sample_features, PRT=bad)
    with pytest.raises(ValidationError) as exc:
        derive_traits(features)
    assert exc.value.field == "features.PRT"


def test_non_mapping_features_rejected():
    with pytest.raises(ValidationError):
        derive_traits([0.5] * 10)


# ── Overall score ───────────────────────────────────────────────────────

def test_overall_score_is_mean_of_traits(sample_traits):
    expected = sum(sample_traits.values()) / 8
    assert calculate_overall_score(sample_traits) == pytest.approx(expected)


def test_overall_score_of_reference_features(sample_features):
    assert calculate_overall_score(derive_traits(sample_features)) == pytest.approx(3.81 / 8)


def test_overall_score_matches_mean_for_random_traits():
    rng = random.Random(3)
    for _ in range(100):
        traits = {code: rng.random() for code in TRAIT_CODES}
        assert calculate_overall_score(traits) == pytest.approx(sum(traits.values()) / 8)


def test_overall_score_rejects_incomplete_traits(sample_traits):
    traits = dict(sample_traits)
    del traits["IND"]
    with pytest.raises(ValidationError):
        calculate_overall_score(traits)


# ── Trait resolution ────────────────────────────────────────────────────

def test_supplied_traits_bypass_derivation(sample_features, sample_traits):
    traits, source = resolve_traits(sample_features, sample_traits)
    assert source == "vision"
    assert traits == sample_traits


def test_missing_traits_are_derived(sample_features):
    traits, source = resolve_traits(sample_features, None)
    assert source == "derived"
    assert traits == derive_traits(sample_features)


def test_supplied_traits_are_still_range_checked(sample_features, sample_traits):
    with pytest.raises(ValidationError) as exc:
        resolve_traits(sample_features, dict(sample_traits, CNF=1.5))
    assert exc.value.field == "traits.CNF"


def test_features_validated_even_when_traits_supplied(sample_features, sample_traits):
    with pytest.raises(ValidationError):
        resolve_traits(dict(sample_features, SLN=2), sample_traits)


# ── Daily averaging ─────────────────────────────────────────────────────

def test_average_traits_is_per_trait_mean(sample_traits):
    other = {code: 0.0 for code in TRAIT_CODES}
    avg = average_traits([sample_traits, other])
    for code in TRAIT_CODES:
        assert avg[code] == pytest.approx(sample_traits[code] / 2)


def test_average_traits_requires_input():
    with pytest.raises(ValidationError):
        average_traits([])
