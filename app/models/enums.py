from enum import Enum

from app.utils.errors import ValidationError


class Side(str, Enum):
    """One of the two competitors in a match, by position only"""

    A = "A"
    B = "B"

    @classmethod
    def coerce(cls, value, field="side"):
        """Turn 'A'/'b'/Side/None into a Side (or None when absent)"""
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError(f"{field} must be 'A' or 'B'", field=field)


class FinishType(str, Enum):
    DECISION = "decision"
    KO_TKO = "ko_tko"
    SUBMISSION = "submission"

    @classmethod
    def coerce(cls, value, field="finish_type"):
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValidationError(f"{field} must be one of: {choices}", field=field)

    @property
    def is_finish(self):
        """KO/TKO and submissions end the fight early; decisions do not"""
        return self is not FinishType.DECISION


class ContestType(str, Enum):
    MATCH_PICKS = "match_picks"
    PICK_6 = "pick_6"


class WrestlerRole(str, Enum):
    FAVORITE = "favorite"
    UNDERDOG = "underdog"
    EVEN = "even"
