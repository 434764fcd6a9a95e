"""
Odds conversion helpers

American odds (+150 / -200 / 0), decimal odds ratios (2.5 / 1.5 / 1.0) and
implied win probabilities. All functions are pure.
"""

import math


def round_half_up(value, digits=0):
    """
    Round the way the scoreboard always has: halves go up (31.25 -> 31.3).

    Python's built-in round() uses banker's rounding, which would shift
    published point values by 0.1 on exact halves.
    """
    factor = 10**digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded


def american_to_decimal(american_odds):
    """
    Convert American odds to a decimal odds ratio

    +150 -> 2.5 (underdog), -200 -> 1.5 (favorite), 0 -> 1.0 (pick-em)
    """
    if american_odds == 0:
        return 1.0
    if american_odds > 0:
        # +150 wins $150 for every $100 bet
        return american_odds / 100 + 1
    # -200 bets $200 to win $100
    return 100 / abs(american_odds) + 1


def decimal_to_american(decimal_odds):
    """
    Convert a decimal odds ratio back to American odds.

    Lossy: the result is rounded to the nearest integer, so converting
    American -> decimal -> American may drift by one.
    """
    if decimal_odds == 1.0:
        return 0
    if decimal_odds >= 2.0:
        return round_half_up((decimal_odds - 1) * 100)
    return round_half_up(-100 / (decimal_odds - 1))


def american_to_implied_probability(american_odds):
    """
    Implied win probability for the side quoted at ``american_odds``.

    Only defined for nonzero odds; callers handle pick-em (0) themselves.
    """
    if american_odds > 0:
        return 100 / (american_odds + 100)
    return abs(american_odds) / (abs(american_odds) + 100)
