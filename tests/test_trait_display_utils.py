import pytest

from inkscore.schemas.analysis_schemas import PersonalityTraits
from inkscore.utils.trait_display_utils import convert_traits_to_display, format_trait_summary
from inkscore.utils.trait_validation import ValidationError


def test_display_rows_in_trait_order(sample_traits):
    rows = convert_traits_to_display(sample_traits)
    assert [r.code for r in rows] == ["CNF", "EMX", "CRT", "DSC", "SOC", "NRG", "INT", "IND"]
    assert rows[0].name == "Confidence"
    assert rows[0].score == 70
    assert rows[0].icon == "star"
    assert rows[-1].color == "#84CC16"


def test_scores_round_half_up(sample_traits):
    rows = convert_traits_to_display(dict(sample_traits, CNF=0.125, EMX=0.994))
    assert rows[0].score == 13
    assert rows[1].score == 99


def test_accepts_pydantic_traits(sample_traits):
    rows = convert_traits_to_display(PersonalityTraits(**sample_traits))
    assert rows[7].score == 90


def test_summary_lists_every_trait(sample_traits):
    summary = format_trait_summary(sample_traits)
    assert "• Confidence: 70%" in summary
    assert "• Independence: 90%" in summary
    assert len(summary.splitlines()) == 9


def test_display_rejects_invalid_traits(sample_traits):
    with pytest.raises(ValidationError):
        convert_traits_to_display(dict(sample_traits, SOC=-0.2))
