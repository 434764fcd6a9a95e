"""
Scoring Engine for match-picks contests

Point values for favorites and underdogs are fixed when a match is created,
using either the ratio rule or the balanced expected-value rule. Picks are
scored against those stored values once a winner is recorded.
Pick 6 contests use their own formulas, see app/utils/pick6_scoring.py.
"""

import logging
import math

from app.models import (
    BalancedMatchPoints,
    EventPotential,
    EventScore,
    MatchPoints,
    WrestlerRole,
)
from app.utils.odds import american_to_decimal, american_to_implied_probability

logger = logging.getLogger(__name__)

UNDERDOG_POINTS = 1000
MIN_FAVORITE_POINTS = 50
EVEN_MATCH_POINTS = 500  # Used when no favorite has been set
PICK_EM_THRESHOLD = 5  # |odds| at or below this is a true pick-em
MIN_POINTS_FRACTION = 0.1


def calculate_match_points(odds_ratio):
    """
    Ratio rule: underdog = 1000, favorite = 1000 / odds_ratio (minimum 50).

    Ratios below 1.0 are treated as an even match.
    """
    normalized = max(1.0, odds_ratio)
    favorite_points = max(MIN_FAVORITE_POINTS, math.floor(UNDERDOG_POINTS / normalized))

    return MatchPoints(
        favorite_points=favorite_points,
        underdog_points=UNDERDOG_POINTS,
        odds_ratio=normalized,
    )


def calculate_match_points_from_american(american_odds, base_points=1000):
    """
    Balanced rule: picking either side has the same expected value.

        favorite_win_rate * favorite_points == underdog_win_rate * underdog_points

    The side quoted in the odds is solved for; the other side is pinned to
    ``base_points``. Both values are floored at 10% of ``base_points``.

    Args:
        american_odds: Odds for the favorite (negative) or underdog (positive)
        base_points: Points for the pinned side

    Returns:
        BalancedMatchPoints
    """
    if american_odds == 0 or abs(american_odds) <= PICK_EM_THRESHOLD:
        logger.debug(f"Odds {american_odds} treated as pick-em")
        return BalancedMatchPoints(
            favorite_points=base_points,
            underdog_points=base_points,
            odds_ratio=1.0,
            american_odds=0,
        )

    if american_odds < 0:
        favorite_win_probability = american_to_implied_probability(american_odds)
        underdog_win_probability = 1 - favorite_win_probability

        underdog_points = base_points
        favorite_points = math.floor(
            underdog_win_probability * base_points / favorite_win_probability
        )
    else:
        underdog_win_probability = american_to_implied_probability(american_odds)
        favorite_win_probability = 1 - underdog_win_probability

        favorite_points = base_points
        underdog_points = math.floor(
            favorite_win_probability * base_points / underdog_win_probability
        )

    floor = math.floor(base_points * MIN_POINTS_FRACTION)
    if favorite_points < floor or underdog_points < floor:
        logger.debug(f"Minimum of {floor} points applied for odds {american_odds}")

    return BalancedMatchPoints(
        favorite_points=max(floor, favorite_points),
        underdog_points=max(floor, underdog_points),
        odds_ratio=american_to_decimal(american_odds),
        american_odds=american_odds,
    )


def get_wrestler_role(match, side):
    """Is ``side`` the favorite, the underdog, or is the match even?"""
    if not match.favorite:
        return WrestlerRole.EVEN
    return WrestlerRole.FAVORITE if side == match.favorite else WrestlerRole.UNDERDOG


def get_picking_points(match):
    """Points a user would earn for picking each wrestler"""
    if not match.favorite:
        return {"side_a_points": EVEN_MATCH_POINTS, "side_b_points": EVEN_MATCH_POINTS}

    return {
        "side_a_points": (
            match.favorite_points if match.favorite == "A" else match.underdog_points
        ),
        "side_b_points": (
            match.favorite_points if match.favorite == "B" else match.underdog_points
        ),
    }


def calculate_pick_points(match, pick):
    """
    Calculate points earned for a single pick.

    Returns:
        0 if the match has no winner yet, nothing was selected, or the pick was wrong
        500 for a correct pick in a match without a favorite
        the stored favorite/underdog points otherwise
    """
    if not match.winner or not pick.selected_side:
        return 0

    if pick.selected_side != match.winner:
        return 0

    if not match.favorite:
        return EVEN_MATCH_POINTS

    picked_favorite = pick.selected_side == match.favorite
    return match.favorite_points if picked_favorite else match.underdog_points


def calculate_event_potential(matches):
    """Best case, worst case, all-favorites and all-underdogs totals for an event"""
    max_possible = 0
    min_possible = 0
    all_favorites = 0
    all_underdogs = 0

    for match in matches:
        points = get_picking_points(match)
        max_possible += max(points.values())
        min_possible += min(points.values())

        if match.favorite:
            all_favorites += match.favorite_points
            all_underdogs += match.underdog_points
        else:
            all_favorites += EVEN_MATCH_POINTS
            all_underdogs += EVEN_MATCH_POINTS

    return EventPotential(
        max_possible=max_possible,
        min_possible=min_possible,
        all_favorites=all_favorites,
        all_underdogs=all_underdogs,
    )


def score_match_picks(matches, picks):
    """
    Total a participant's realized points across an event.

    Picks for matches not in ``matches`` are ignored.
    """
    matches_by_id = {match.id: match for match in matches}
    total_points = 0
    correct_picks = 0
    total_picks = 0

    for pick in picks:
        match = matches_by_id.get(pick.match_id)
        if match is None:
            logger.debug(f"Ignoring pick for unknown match {pick.match_id}")
            continue

        total_picks += 1
        points = calculate_pick_points(match, pick)
        total_points += points
        if match.winner and pick.selected_side == match.winner:
            correct_picks += 1

    return EventScore(
        total_points=total_points,
        correct_picks=correct_picks,
        total_picks=total_picks,
    )
