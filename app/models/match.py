from dataclasses import dataclass
from typing import Optional

from .base import Record, require_mapping, to_float, to_int
from .enums import FinishType, Side

DEFAULT_ODDS_A = -110
DEFAULT_ODDS_B = 110


@dataclass(frozen=True)
class Match(Record):
    """
    A single bout as the scoring engine sees it.

    ``favorite`` and ``winner`` are None until an organizer records them.
    ``favorite_points``/``underdog_points`` are the values stored when the
    match was created (ratio or balanced rule); ``american_odds_a/b`` are the
    per-fighter odds used by Pick 6 contests.
    """

    id: Optional[str] = None
    wrestler_a: str = ""
    wrestler_b: str = ""
    favorite: Optional[Side] = None
    odds_ratio: float = 1.0
    american_odds: Optional[int] = None
    american_odds_a: Optional[int] = None
    american_odds_b: Optional[int] = None
    favorite_points: int = 0
    underdog_points: int = 0
    winner: Optional[Side] = None
    finish_type: Optional[FinishType] = None
    weight_class: str = ""
    match_order: Optional[int] = None

    def __repr__(self):
        return f"<Match {self.id} {self.wrestler_a or 'A'} vs {self.wrestler_b or 'B'}>"

    @property
    def is_complete(self):
        return self.winner is not None

    def odds_for(self, side):
        """Per-fighter American odds for Pick 6, with the standard -110/+110 line"""
        if side is Side.A:
            return self.american_odds_a if self.american_odds_a is not None else DEFAULT_ODDS_A
        return self.american_odds_b if self.american_odds_b is not None else DEFAULT_ODDS_B

    @classmethod
    def from_dict(cls, data):
        require_mapping(data, "match")
        match_id = data.get("id")
        return cls(
            id=str(match_id) if match_id is not None else None,
            wrestler_a=(data.get("wrestler_a") or "").strip(),
            wrestler_b=(data.get("wrestler_b") or "").strip(),
            favorite=Side.coerce(data.get("favorite"), "favorite"),
            odds_ratio=to_float(data.get("odds_ratio"), "odds_ratio", 1.0),
            american_odds=to_int(data.get("american_odds"), "american_odds"),
            american_odds_a=to_int(data.get("american_odds_a"), "american_odds_a"),
            american_odds_b=to_int(data.get("american_odds_b"), "american_odds_b"),
            favorite_points=to_int(data.get("favorite_points"), "favorite_points", 0),
            underdog_points=to_int(data.get("underdog_points"), "underdog_points", 0),
            winner=Side.coerce(data.get("winner"), "winner"),
            finish_type=FinishType.coerce(data.get("finish_type")),
            weight_class=(data.get("weight_class") or "").strip(),
            match_order=to_int(data.get("match_order"), "match_order"),
        )
