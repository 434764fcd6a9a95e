from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField, StringField
from wtforms.validators import NumberRange, Optional, ValidationError

from app.models import ContestType
from app.utils.validation import (
    match_field_errors,
    sanitize_string,
    validate_american_odds,
)


class AmericanOdds:
    """WTForms validator wrapping validate_american_odds()"""

    def __call__(self, form, field):
        if field.data is None:
            return
        result = validate_american_odds(field.data)
        if not result.is_valid:
            raise ValidationError(result.error)


class MatchForm(FlaskForm):
    """
    Organizer input for a new match, before points are stored

    Weight class, names and match order are checked by match_field_errors(),
    the same rules validate_match() applies to API payloads.
    """

    weight_class = StringField("Weight Class", filters=[sanitize_string])
    wrestler_a = StringField("Wrestler A", filters=[sanitize_string])
    wrestler_b = StringField("Wrestler B", filters=[sanitize_string])
    match_order = IntegerField("Match Order")
    contest_type = SelectField(
        "Contest Type",
        choices=[(c.value, c.value) for c in ContestType],
        default=ContestType.MATCH_PICKS.value,
    )
    favorite = SelectField(
        "Favorite", choices=[("", "None"), ("A", "A"), ("B", "B")], default=""
    )
    # Match-picks format: one line for the favorite, 0 for pick-em
    american_odds = IntegerField(
        "Vegas Odds", validators=[Optional(), AmericanOdds()], default=0
    )
    base_points = IntegerField(
        "Base Points",
        validators=[Optional(), NumberRange(min=10, max=100000)],
        default=None,
    )
    # Pick 6 format: individual fighter odds
    american_odds_a = IntegerField(
        "Fighter A Odds", validators=[Optional(), AmericanOdds()], default=-110
    )
    american_odds_b = IntegerField(
        "Fighter B Odds", validators=[Optional(), AmericanOdds()], default=110
    )

    def validate(self, extra_validators=None):
        is_valid = super().validate(extra_validators)

        for name, messages in match_field_errors(self.data).items():
            self[name].errors.extend(messages)
            is_valid = False

        return is_valid
