"""
Tests for Pick 6 scoring.
"""
import pytest

from app.models import FinishType, Match, Pick6Score, Pick6Selection, Side
from app.utils.errors import ValidationError
from app.utils.pick6_scoring import (
    calculate_base_points,
    calculate_finish_bonus,
    calculate_potential_points,
    calculate_underdog_bonus,
    format_odds,
    format_points,
    get_fighter_potentials,
    get_fighter_status,
    is_underdog,
    score_pick6_entry,
    score_pick6_selection,
    validate_pick6_entry,
)


def selection(match_id, side=Side.A, odds=-110, double_down=False):
    return Pick6Selection(
        match_id=match_id,
        fighter_side=side,
        american_odds=odds,
        is_double_down=double_down,
    )


def test_base_points_underdog_is_the_odds():
    assert calculate_base_points(150) == 150


def test_base_points_favorite_scales_from_10000():
    assert calculate_base_points(-150) == pytest.approx(66.7)
    assert calculate_base_points(-200) == pytest.approx(50.0)


def test_base_points_rounds_halves_up():
    # 10000 / 320 = 31.25
    assert calculate_base_points(-320) == pytest.approx(31.3)


def test_base_points_pick_em_is_even_money():
    assert calculate_base_points(0) == calculate_base_points(100) == calculate_base_points(-100)


@pytest.mark.parametrize(
    "finish_type,expected",
    [(None, 0), ("decision", 0), ("ko_tko", 50), ("submission", 50), (FinishType.KO_TKO, 50)],
)
def test_finish_bonus(finish_type, expected):
    assert calculate_finish_bonus(finish_type) == expected


def test_finish_bonus_rejects_unknown_finish():
    with pytest.raises(ValidationError):
        calculate_finish_bonus("disqualification")


def test_underdog_bonus_only_from_plus_100():
    assert calculate_underdog_bonus(150, 150) == pytest.approx(15.0)
    assert calculate_underdog_bonus(100, 100) == pytest.approx(10.0)
    assert calculate_underdog_bonus(-150, 66.7) == 0
    assert calculate_underdog_bonus(0, 100) == 0


def test_full_scoring_underdog_ko_double_down():
    score = score_pick6_selection(150, is_winner=True, finish_type="ko_tko", is_double_down=True)
    assert score.base_points == 150
    assert score.finish_bonus == 50
    assert score.underdog_bonus == pytest.approx(15.0)
    assert score.double_down_multiplier == 2
    assert score.total_points == pytest.approx(430.0)


def test_favorite_decision_scoring():
    score = score_pick6_selection(-200, is_winner=True, finish_type="decision")
    assert score.total_points == pytest.approx(50.0)
    assert score.underdog_bonus == 0
    assert score.double_down_multiplier == 1


@pytest.mark.parametrize("odds", [-1000, -150, 0, 150, 2500])
@pytest.mark.parametrize("double_down", [True, False])
def test_losing_selection_scores_nothing(odds, double_down):
    score = score_pick6_selection(
        odds, is_winner=False, finish_type="submission", is_double_down=double_down
    )
    assert score == Pick6Score()
    assert score.total_points == 0
    assert score.base_points == 0
    assert score.finish_bonus == 0
    assert score.underdog_bonus == 0


def test_total_is_components_times_multiplier():
    score = score_pick6_selection(-320, is_winner=True, finish_type="ko_tko", is_double_down=True)
    expected = (score.base_points + score.finish_bonus + score.underdog_bonus) * 2
    assert score.total_points == pytest.approx(round(expected, 1))


def test_potential_points_assume_finish():
    assert calculate_potential_points(150) == pytest.approx(215.0)
    assert calculate_potential_points(150, is_double_down=True) == pytest.approx(430.0)
    assert calculate_potential_points(-200) == pytest.approx(100.0)


def test_fighter_potentials_use_default_line():
    match = Match(id="m1")
    potentials = get_fighter_potentials(match)
    assert potentials["side_a_points"] == pytest.approx(140.9)  # 90.9 + 50
    assert potentials["side_b_points"] == pytest.approx(171.0)  # 110 + 50 + 11


def test_validate_entry_accepts_six_unique_matches():
    picks = [selection(f"m{i}") for i in range(6)]
    result = validate_pick6_entry(picks, 6)
    assert result.is_valid
    assert result.errors == []


def test_validate_entry_wrong_count():
    result = validate_pick6_entry([selection("m1")], 6)
    assert not result.is_valid
    assert result.errors == ["Must select exactly 6 fighters"]


def test_validate_entry_duplicate_match_with_correct_count():
    picks = [selection(f"m{i}") for i in range(5)] + [selection("m0", side=Side.B)]
    result = validate_pick6_entry(picks, 6)
    assert not result.is_valid
    assert result.errors == ["Cannot select multiple fighters from the same fight"]


def test_validate_entry_reports_every_error():
    picks = [selection("m1"), selection("m1", side=Side.B)]
    result = validate_pick6_entry(picks, 6)
    assert len(result.errors) == 2


def test_validate_entry_single_double_down():
    picks = [selection(f"m{i}", double_down=i < 2) for i in range(6)]
    result = validate_pick6_entry(picks, 6)
    assert result.errors == ["Only one pick can be a double down"]


def test_score_entry_against_results():
    matches = [
        Match(id="m1", winner=Side.A, finish_type=FinishType.KO_TKO),
        Match(id="m2", winner=Side.B, finish_type=FinishType.DECISION),
        Match(id="m3", winner=Side.A),
    ]
    picks = [
        selection("m1", Side.A, odds=150, double_down=True),
        selection("m2", Side.A, odds=-200),
        selection("m3", Side.A, odds=-200),
    ]
    result = score_pick6_entry(picks, matches)
    assert result.picks_correct == 2
    assert result.total_points == pytest.approx(480.0)
    assert result.is_complete
    assert [match_id for match_id, _ in result.selections] == ["m1", "m2", "m3"]


def test_score_entry_incomplete_without_winner():
    matches = [Match(id="m1", winner=Side.A), Match(id="m2")]
    picks = [selection("m1", Side.A, odds=200), selection("m2", Side.A, odds=200)]
    result = score_pick6_entry(picks, matches)
    assert not result.is_complete
    assert result.picks_correct == 1
    assert result.total_points == pytest.approx(220.0)


def test_formatting_helpers():
    assert format_points(430) == "430.0"
    assert format_points(66.66) == "66.7"
    assert format_odds(150) == "+150"
    assert format_odds(-200) == "-200"
    assert format_odds(0) == "0"


def test_fighter_status():
    assert is_underdog(150)
    assert not is_underdog(-150)
    assert not is_underdog(0)
    assert get_fighter_status(150) == "Underdog"
    assert get_fighter_status(-150) == "Favorite"
    assert get_fighter_status(0) == "Pick 'em"
