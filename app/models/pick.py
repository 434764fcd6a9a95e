from dataclasses import dataclass
from typing import Optional

from app.utils.errors import ValidationError

from .base import Record, require_mapping, to_bool, to_int
from .enums import Side


@dataclass(frozen=True)
class Pick(Record):
    """A match-picks selection: which wrestler the user thinks will win"""

    match_id: Optional[str] = None
    selected_side: Optional[Side] = None

    @classmethod
    def from_dict(cls, data):
        require_mapping(data, "pick")
        match_id = data.get("match_id")
        return cls(
            match_id=str(match_id) if match_id is not None else None,
            selected_side=Side.coerce(
                data.get("selected_side", data.get("selected_wrestler")),
                "selected_side",
            ),
        )


@dataclass(frozen=True)
class Pick6Selection(Record):
    """One fighter chosen in a Pick 6 entry, with the odds locked at pick time"""

    match_id: str
    fighter_side: Side
    american_odds: int
    is_double_down: bool = False

    @classmethod
    def from_dict(cls, data):
        require_mapping(data, "pick")
        match_id = data.get("match_id")
        if match_id is None or match_id == "":
            raise ValidationError("match_id is required", field="match_id")

        side = Side.coerce(data.get("fighter_side", data.get("fighter_id")), "fighter_side")
        if side is None:
            raise ValidationError("fighter_side is required", field="fighter_side")

        odds = to_int(data.get("american_odds"), "american_odds")
        if odds is None:
            raise ValidationError("american_odds is required", field="american_odds")

        return cls(
            match_id=str(match_id),
            fighter_side=side,
            american_odds=odds,
            is_double_down=to_bool(data.get("is_double_down")),
        )
