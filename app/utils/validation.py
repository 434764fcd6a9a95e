"""
Input validation and display helpers for organizer odds entry

Odds validators stop at the first broken rule and return a single error.
Record validators (match, pick) collect every error.
"""

import re

from app.models import Side, ValidationResult
from app.utils.errors import ValidationError
from app.utils.odds import american_to_implied_probability, round_half_up
from app.utils.scoring import PICK_EM_THRESHOLD

MAX_AMERICAN_ODDS = 10000
MIN_ODDS_RATIO = 1.0
MAX_ODDS_RATIO = 20.0

MAX_WEIGHT_CLASS_LENGTH = 50
MAX_NAME_LENGTH = 100
MIN_MATCH_ORDER = 1
MAX_MATCH_ORDER = 20

STRENGTH_TIERS = ("slight", "moderate", "heavy", "extreme")

SUGGESTED_AMERICAN_ODDS = {
    "slight": -150,
    "moderate": -300,
    "heavy": -600,
    "extreme": -1000,
}

SUGGESTED_ODDS_RATIOS = {
    "slight": 1.5,  # favorite gets 666 points
    "moderate": 3.0,  # 333
    "heavy": 6.0,  # 166
    "extreme": 10.0,  # 100
}


def validate_american_odds(odds):
    """Validate American odds input. 0 is a pick-em."""
    if odds == 0:
        return ValidationResult.ok()

    if 0 < odds < 100:
        return ValidationResult.from_errors(
            ["Positive odds must be 100 or greater (e.g., +100, +150)"]
        )

    if -100 < odds < 0:
        return ValidationResult.from_errors(
            ["Negative odds must be -100 or less (e.g., -100, -150)"]
        )

    if abs(odds) > MAX_AMERICAN_ODDS:
        return ValidationResult.from_errors([f"Odds cannot exceed ±{MAX_AMERICAN_ODDS}"])

    return ValidationResult.ok()


def validate_odds_ratio(odds_ratio):
    if odds_ratio < MIN_ODDS_RATIO:
        return ValidationResult.from_errors(
            ["Odds ratio must be at least 1.0 (even match)"]
        )

    if odds_ratio > MAX_ODDS_RATIO:
        return ValidationResult.from_errors(
            ["Odds ratio cannot exceed 20:1 (too extreme)"]
        )

    return ValidationResult.ok()


def suggest_american_odds(tier):
    """Pre-fill value for the odds field; unknown tiers mean an even match"""
    return SUGGESTED_AMERICAN_ODDS.get(tier, 0)


def suggest_odds_ratio(tier):
    return SUGGESTED_ODDS_RATIOS.get(tier, 1.0)


def get_odds_description(odds_ratio):
    """Risk/reward blurb shown next to an odds ratio"""
    if odds_ratio <= 1.1:
        return "Even match - equal points for both wrestlers"
    elif odds_ratio <= 2.0:
        return "Slight favorite - small point difference"
    elif odds_ratio <= 4.0:
        return "Moderate favorite - good risk/reward balance"
    elif odds_ratio <= 8.0:
        return "Heavy favorite - high risk, high reward for upset"
    else:
        return "Extreme favorite - maximum risk/reward scenario"


def get_american_odds_description(american_odds, base_points=1000):
    """
    Describe a balanced-points line for organizers.

    The implied win chance is taken from the signed odds, so -150 reads as a
    favorite with a 60% chance. Earlier versions of this text used abs(odds)
    and showed favorites with the underdog's 40%.
    """
    if american_odds == 0 or abs(american_odds) <= PICK_EM_THRESHOLD:
        return f"True pick-em - both fighters worth {base_points} points"

    percent_chance = round_half_up(american_to_implied_probability(american_odds) * 100)

    if american_odds > 0:
        return f"Underdog with {percent_chance}% implied win chance - balanced expected value"
    return f"Favorite with {percent_chance}% implied win chance - balanced expected value"


def format_odds_ratio(odds_ratio):
    """Format an odds ratio for display: "9:1", "2.5:1", "Even" """
    if odds_ratio <= 1.1:
        return "Even"

    ratio = round_half_up(odds_ratio, 1)
    return f"{ratio:g}:1"


def format_american_odds(american_odds):
    """Format American odds for display: "+150", "-200", "Even (Pick-em)" """
    if american_odds == 0:
        return "Even (Pick-em)"
    if american_odds > 0:
        return f"+{american_odds}"
    return f"{american_odds}"


def match_field_errors(data):
    """
    Check organizer match data field by field.

    Returns a dict of field name -> messages, holding only the fields that
    failed, in form order. MatchForm and validate_match() both use it.
    """
    errors = {}

    weight_class = (data.get("weight_class") or "").strip()
    if not weight_class:
        errors["weight_class"] = ["Weight class is required"]
    elif len(weight_class) > MAX_WEIGHT_CLASS_LENGTH:
        errors["weight_class"] = [
            f"Weight class must be less than {MAX_WEIGHT_CLASS_LENGTH} characters"
        ]

    for key, label in (("wrestler_a", "Wrestler A"), ("wrestler_b", "Wrestler B")):
        name = (data.get(key) or "").strip()
        if not name:
            errors[key] = [f"{label} name is required"]
        elif len(name) > MAX_NAME_LENGTH:
            errors[key] = [f"{label} name must be less than {MAX_NAME_LENGTH} characters"]

    wrestler_a = (data.get("wrestler_a") or "").strip().lower()
    wrestler_b = (data.get("wrestler_b") or "").strip().lower()
    if wrestler_a == wrestler_b:
        errors.setdefault("wrestler_b", []).append("Wrestler names must be different")

    match_order = data.get("match_order")
    if (
        not isinstance(match_order, int)
        or isinstance(match_order, bool)
        or not MIN_MATCH_ORDER <= match_order <= MAX_MATCH_ORDER
    ):
        errors["match_order"] = [
            f"Match order must be a number between {MIN_MATCH_ORDER} and {MAX_MATCH_ORDER}"
        ]

    return errors


def validate_match(data):
    """Validate organizer match data, collecting every error"""
    errors = match_field_errors(data)
    return ValidationResult.from_errors(
        [message for messages in errors.values() for message in messages]
    )


def validate_pick(selected_side):
    try:
        side = Side.coerce(selected_side)
    except ValidationError:
        side = None

    if side is None:
        return ValidationResult.from_errors(["Please select a wrestler"])
    return ValidationResult.ok()


def validate_required(value, field_name):
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationResult.from_errors([f"{field_name} is required"])
    return ValidationResult.ok()


def sanitize_string(value):
    """Trim and collapse internal whitespace"""
    if not value:
        return ""
    return re.sub(r"\s+", " ", value.strip())


def validate_or_raise(validation, context=None):
    """Raise ValidationError carrying all messages when validation failed"""
    if validation.is_valid:
        return

    message = ", ".join(validation.errors)
    if context:
        message = f"{context}: {message}"
    raise ValidationError(message)
