"""
Pick 6 Scoring System

Each entry picks one fighter in six different fights. A winning fighter
earns base points from its odds, plus a finish bonus for KO/TKO or
submission, plus a 10% bonus for underdogs. One pick can be doubled down.
"""

import logging
from collections import Counter

from app.models import FinishType, Pick6EntryScore, Pick6Score, Side, ValidationResult
from app.utils.odds import round_half_up

logger = logging.getLogger(__name__)

FINISH_BONUS = 50
UNDERDOG_BONUS_RATE = 0.1
UNDERDOG_BONUS_MIN_ODDS = 100
FAVORITE_POINT_POOL = 10000
EVEN_MONEY_POINTS = 100
DOUBLE_DOWN_MULTIPLIER = 2
DEFAULT_PICK_COUNT = 6


def calculate_base_points(american_odds):
    """
    Underdogs score their odds (+250 -> 250), favorites score 10000 / |odds|
    (-200 -> 50.0). A pick 'em (0) pays even money, the same as +100/-100.
    """
    if american_odds > 0:
        return american_odds
    if american_odds == 0:
        return EVEN_MONEY_POINTS
    return round_half_up(FAVORITE_POINT_POOL / abs(american_odds), 1)


def calculate_finish_bonus(finish_type):
    finish_type = FinishType.coerce(finish_type)
    return FINISH_BONUS if finish_type and finish_type.is_finish else 0


def calculate_underdog_bonus(american_odds, base_points):
    if american_odds >= UNDERDOG_BONUS_MIN_ODDS:
        return round_half_up(base_points * UNDERDOG_BONUS_RATE, 1)
    return 0


def score_pick6_selection(american_odds, is_winner, finish_type=None, is_double_down=False):
    """
    Calculate total points for a Pick 6 selection

    A losing selection scores nothing, double down or not.

    Args:
        american_odds: Odds of the selected fighter
        is_winner: Whether the selected fighter won
        finish_type: decision / ko_tko / submission, or None
        is_double_down: Whether this is the entry's double down pick

    Returns:
        Pick6Score
    """
    if not is_winner:
        return Pick6Score()

    base_points = calculate_base_points(american_odds)
    finish_bonus = calculate_finish_bonus(finish_type)
    underdog_bonus = calculate_underdog_bonus(american_odds, base_points)
    multiplier = DOUBLE_DOWN_MULTIPLIER if is_double_down else 1

    subtotal = base_points + finish_bonus + underdog_bonus
    return Pick6Score(
        base_points=base_points,
        finish_bonus=finish_bonus,
        underdog_bonus=underdog_bonus,
        double_down_multiplier=multiplier,
        total_points=round_half_up(subtotal * multiplier, 1),
    )


def calculate_potential_points(american_odds, is_double_down=False):
    """Maximum points for a selection before the fight: a win by finish"""
    best_case = score_pick6_selection(
        american_odds,
        is_winner=True,
        finish_type=FinishType.KO_TKO,
        is_double_down=is_double_down,
    )
    return best_case.total_points


def get_fighter_potentials(match, is_double_down=False):
    """Potential points for picking each fighter, from the match's per-fighter odds"""
    return {
        "side_a_points": calculate_potential_points(match.odds_for(Side.A), is_double_down),
        "side_b_points": calculate_potential_points(match.odds_for(Side.B), is_double_down),
    }


def validate_pick6_entry(picks, required_pick_count=DEFAULT_PICK_COUNT):
    """
    Check an entry's picks. Every failed rule is reported, not just the first.
    """
    errors = []

    if len(picks) != required_pick_count:
        errors.append(f"Must select exactly {required_pick_count} fighters")

    match_counts = Counter(pick.match_id for pick in picks)
    if any(count > 1 for count in match_counts.values()):
        errors.append("Cannot select multiple fighters from the same fight")

    if sum(1 for pick in picks if pick.is_double_down) > 1:
        errors.append("Only one pick can be a double down")

    return ValidationResult.from_errors(errors)


def score_pick6_entry(selections, matches):
    """
    Score every selection in an entry against recorded results.

    Selections for matches without a winner (or missing from ``matches``)
    score zero and leave the entry incomplete.
    """
    matches_by_id = {match.id: match for match in matches}
    scored = []
    total = 0
    picks_correct = 0
    is_complete = True

    for selection in selections:
        match = matches_by_id.get(selection.match_id)
        if match is None or not match.is_complete:
            is_complete = False
            scored.append((selection.match_id, Pick6Score()))
            continue

        is_winner = selection.fighter_side == match.winner
        score = score_pick6_selection(
            selection.american_odds,
            is_winner=is_winner,
            finish_type=match.finish_type,
            is_double_down=selection.is_double_down,
        )
        if is_winner:
            picks_correct += 1
        total += score.total_points
        scored.append((selection.match_id, score))

    logger.debug(
        f"Scored Pick 6 entry: {picks_correct}/{len(selections)} correct, {total} points"
    )

    return Pick6EntryScore(
        total_points=round_half_up(total, 1),
        picks_correct=picks_correct,
        is_complete=is_complete,
        selections=scored,
    )


def format_points(points):
    return f"{points:.1f}"


def format_odds(american_odds):
    """Sign-inclusive display: +150, -200, 0"""
    if american_odds > 0:
        return f"+{american_odds}"
    return str(american_odds)


def is_underdog(american_odds):
    return american_odds > 0


def get_fighter_status(american_odds):
    if american_odds > 0:
        return "Underdog"
    elif american_odds < 0:
        return "Favorite"
    return "Pick 'em"
