from functools import wraps

from flask import current_app, jsonify, request

from app import limiter
from app.forms.matches import MatchForm
from app.models import ContestType, Match, Pick, Pick6Selection, Side
from app.models.base import to_bool, to_float, to_int
from app.routes.api import bp
from app.utils.cache_utils import cached_route, get_cache_stats
from app.utils.errors import ValidationError
from app.utils.logging_config import MatchLogger
from app.utils.odds import (
    american_to_decimal,
    american_to_implied_probability,
    decimal_to_american,
)
from app.utils.pick6_scoring import (
    calculate_potential_points,
    format_odds,
    format_points,
    get_fighter_potentials,
    get_fighter_status,
    score_pick6_entry,
    score_pick6_selection,
    validate_pick6_entry,
)
from app.utils.scoring import (
    calculate_event_potential,
    calculate_match_points,
    calculate_match_points_from_american,
    calculate_pick_points,
    get_picking_points,
    get_wrestler_role,
    score_match_picks,
)
from app.utils.validation import (
    STRENGTH_TIERS,
    format_american_odds,
    format_odds_ratio,
    get_american_odds_description,
    get_odds_description,
    suggest_american_odds,
    suggest_odds_ratio,
    validate_american_odds,
    validate_odds_ratio,
)


def add_security_headers(f):
    """Add security headers to API responses"""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        response = f(*args, **kwargs)
        if hasattr(response, "headers"):
            response.headers["Cache-Control"] = (
                "no-store, no-cache, must-revalidate, max-age=0"
            )
        return response

    return decorated_function


def get_payload():
    """Request body as a dict, or a 400 if it isn't a JSON object"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require(data, key):
    value = data.get(key)
    if value is None or value == "":
        raise ValidationError(f"{key} is required", field=key)
    return value


def get_list(data, key):
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list", field=key)
    return value


@bp.route("/health")
@limiter.exempt
def health():
    """Liveness check"""
    return jsonify({"status": "ok", "cache": get_cache_stats()})


# Odds


@bp.route("/odds/convert", methods=["POST"])
@add_security_headers
def convert_odds():
    """Convert American odds or a decimal ratio into every other form"""
    data = get_payload()

    if data.get("american_odds") is not None:
        american = to_int(data["american_odds"], "american_odds")
        decimal = american_to_decimal(american)
    elif data.get("decimal_odds") is not None:
        decimal = to_float(data["decimal_odds"], "decimal_odds")
        if decimal < 1.0:
            raise ValidationError(
                "decimal_odds must be at least 1.0", field="decimal_odds"
            )
        american = decimal_to_american(decimal)
    else:
        raise ValidationError("Provide american_odds or decimal_odds")

    return jsonify(
        {
            "american_odds": american,
            "decimal_odds": round(decimal, 4),
            "implied_probability": (
                round(american_to_implied_probability(american), 4) if american else None
            ),
            "display": format_american_odds(american),
            "ratio_display": format_odds_ratio(decimal),
        }
    )


@bp.route("/odds/validate")
def validate_odds():
    """Validate American odds or an odds ratio passed in the query string"""
    if request.args.get("american_odds") not in (None, ""):
        odds = to_int(request.args["american_odds"], "american_odds")
        result = validate_american_odds(odds)
    elif request.args.get("odds_ratio") not in (None, ""):
        ratio = to_float(request.args["odds_ratio"], "odds_ratio")
        result = validate_odds_ratio(ratio)
    else:
        raise ValidationError("Provide american_odds or odds_ratio")

    return jsonify(result.to_dict())


@bp.route("/odds/suggest/<tier>")
@cached_route(timeout=3600, key_prefix="odds_suggest")
def suggest_odds(tier):
    """Canonical odds for a strength tier, used to pre-fill organizer forms"""
    if tier not in STRENGTH_TIERS:
        raise ValidationError(
            f"tier must be one of: {', '.join(STRENGTH_TIERS)}", field="tier"
        )

    base_points = current_app.config["BASE_POINTS"]
    american = suggest_american_odds(tier)
    ratio = suggest_odds_ratio(tier)
    return {
        "tier": tier,
        "american_odds": american,
        "odds_ratio": ratio,
        "american_description": get_american_odds_description(american, base_points),
        "ratio_description": get_odds_description(ratio),
    }


# Match-picks points


@bp.route("/points/ratio", methods=["POST"])
@add_security_headers
def ratio_points():
    data = get_payload()
    ratio = to_float(require(data, "odds_ratio"), "odds_ratio")
    points = calculate_match_points(ratio)

    response = points.to_dict()
    response["display"] = format_odds_ratio(points.odds_ratio)
    response["description"] = get_odds_description(points.odds_ratio)
    return jsonify(response)


@bp.route("/points/american", methods=["POST"])
@add_security_headers
def american_points():
    data = get_payload()
    odds = to_int(require(data, "american_odds"), "american_odds")
    base_points = to_int(
        data.get("base_points"), "base_points", current_app.config["BASE_POINTS"]
    )
    points = calculate_match_points_from_american(odds, base_points)

    response = points.to_dict()
    response["display"] = format_american_odds(points.american_odds)
    response["description"] = get_american_odds_description(odds, base_points)

    favorite = Side.coerce(data.get("favorite"), "favorite")
    if favorite:
        sided = points.assign_favorite(favorite)
        response["favorite"] = favorite.value
        response["side_a_points"] = sided.points_for(Side.A)
        response["side_b_points"] = sided.points_for(Side.B)

    return jsonify(response)


@bp.route("/matches/preview", methods=["POST"])
@add_security_headers
def preview_match():
    """Validate an organizer's match form and show the points it would store"""
    form = MatchForm(meta={"csrf": False})
    match_log = MatchLogger.for_form(__name__, form)
    if not form.validate():
        match_log.warning(f"Rejected match form: {form.errors}")
        return jsonify({"error": "Invalid match", "errors": form.errors}), 400

    contest_type = ContestType(form.contest_type.data)
    response = {
        "weight_class": form.weight_class.data,
        "wrestler_a": form.wrestler_a.data,
        "wrestler_b": form.wrestler_b.data,
        "match_order": form.match_order.data,
        "contest_type": contest_type.value,
    }

    if contest_type is ContestType.PICK_6:
        match = Match(
            wrestler_a=form.wrestler_a.data,
            wrestler_b=form.wrestler_b.data,
            american_odds_a=form.american_odds_a.data,
            american_odds_b=form.american_odds_b.data,
        )
        response["american_odds_a"] = match.odds_for(Side.A)
        response["american_odds_b"] = match.odds_for(Side.B)
        response["status_a"] = get_fighter_status(match.odds_for(Side.A))
        response["status_b"] = get_fighter_status(match.odds_for(Side.B))
        response["potential_points"] = get_fighter_potentials(match)
        match_log.debug(f"Pick 6 preview: {response['potential_points']}")
        return jsonify(response)

    odds = form.american_odds.data or 0
    base_points = form.base_points.data or current_app.config["BASE_POINTS"]
    points = calculate_match_points_from_american(odds, base_points)
    favorite = Side.coerce(form.favorite.data) if points.american_odds else None

    match = Match(
        wrestler_a=form.wrestler_a.data,
        wrestler_b=form.wrestler_b.data,
        favorite=favorite,
        odds_ratio=points.odds_ratio,
        american_odds=points.american_odds,
        favorite_points=points.favorite_points,
        underdog_points=points.underdog_points,
    )
    response.update(points.to_dict())
    response["favorite"] = favorite.value if favorite else None
    response["picking_points"] = get_picking_points(match)
    response["roles"] = {
        "A": get_wrestler_role(match, Side.A).value,
        "B": get_wrestler_role(match, Side.B).value,
    }
    response["description"] = get_american_odds_description(odds, base_points)
    match_log.debug(
        f"Match preview: {points.favorite_points}/{points.underdog_points} points"
    )
    return jsonify(response)


@bp.route("/picks/score", methods=["POST"])
@add_security_headers
def score_pick():
    data = get_payload()
    match = Match.from_dict(require(data, "match"))
    pick = Pick.from_dict(require(data, "pick"))

    return jsonify(
        {
            "points": calculate_pick_points(match, pick),
            "role": get_wrestler_role(match, pick.selected_side).value
            if pick.selected_side
            else None,
        }
    )


@bp.route("/events/potential", methods=["POST"])
@add_security_headers
def event_potential():
    data = get_payload()
    matches = [Match.from_dict(m) for m in get_list(data, "matches")]
    return jsonify(calculate_event_potential(matches).to_dict())


@bp.route("/events/score", methods=["POST"])
@add_security_headers
def event_score():
    data = get_payload()
    matches = [Match.from_dict(m) for m in get_list(data, "matches")]
    picks = [Pick.from_dict(p) for p in get_list(data, "picks")]
    return jsonify(score_match_picks(matches, picks).to_dict())


# Pick 6


@bp.route("/pick6/score", methods=["POST"])
@add_security_headers
def pick6_score():
    data = get_payload()
    odds = to_int(require(data, "american_odds"), "american_odds")
    score = score_pick6_selection(
        odds,
        is_winner=to_bool(data.get("is_winner")),
        finish_type=data.get("finish_type"),
        is_double_down=to_bool(data.get("is_double_down")),
    )

    response = score.to_dict()
    response["display"] = format_points(score.total_points)
    return jsonify(response)


@bp.route("/pick6/potential", methods=["POST"])
@add_security_headers
def pick6_potential():
    data = get_payload()
    odds = to_int(require(data, "american_odds"), "american_odds")
    is_double_down = to_bool(data.get("is_double_down"))
    potential = calculate_potential_points(odds, is_double_down)

    return jsonify(
        {
            "american_odds": odds,
            "odds_display": format_odds(odds),
            "status": get_fighter_status(odds),
            "potential_points": potential,
            "display": format_points(potential),
        }
    )


@bp.route("/pick6/validate", methods=["POST"])
@add_security_headers
def pick6_validate():
    data = get_payload()
    picks = [Pick6Selection.from_dict(p) for p in get_list(data, "picks")]
    required = to_int(
        data.get("pick_count"), "pick_count", current_app.config["PICK6_PICK_COUNT"]
    )
    return jsonify(validate_pick6_entry(picks, required).to_dict())


@bp.route("/pick6/entry", methods=["POST"])
@add_security_headers
def pick6_entry():
    """Score a whole Pick 6 entry against recorded match results"""
    data = get_payload()
    matches = [Match.from_dict(m) for m in get_list(data, "matches")]
    picks = [Pick6Selection.from_dict(p) for p in get_list(data, "picks")]
    return jsonify(score_pick6_entry(picks, matches).to_dict())
