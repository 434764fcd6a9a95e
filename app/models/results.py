"""
Records returned by the scoring engine
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .base import Record
from .enums import Side


@dataclass(frozen=True)
class MatchPoints(Record):
    """
    Favorite/underdog point values derived from odds alone.

    Carries no side: the engine only sees the shape of the odds, so which
    wrestler is the favorite is attached by the caller via assign_favorite().
    """

    favorite_points: int
    underdog_points: int
    odds_ratio: float

    def assign_favorite(self, side):
        return SidedMatchPoints(
            favorite_points=self.favorite_points,
            underdog_points=self.underdog_points,
            odds_ratio=self.odds_ratio,
            favorite=Side.coerce(side, "favorite"),
        )


@dataclass(frozen=True)
class BalancedMatchPoints(MatchPoints):
    """MatchPoints from the balanced rule; american_odds is 0 for pick-em"""

    american_odds: int = 0


@dataclass(frozen=True)
class SidedMatchPoints(MatchPoints):
    favorite: Optional[Side] = None

    def points_for(self, side):
        if self.favorite is None:
            return self.favorite_points
        if Side.coerce(side) == self.favorite:
            return self.favorite_points
        return self.underdog_points


@dataclass(frozen=True)
class Pick6Score(Record):
    base_points: float = 0
    finish_bonus: float = 0
    underdog_bonus: float = 0
    double_down_multiplier: int = 1
    total_points: float = 0


@dataclass(frozen=True)
class Pick6EntryScore(Record):
    total_points: float = 0
    picks_correct: int = 0
    is_complete: bool = False
    selections: List[Tuple[str, Pick6Score]] = field(default_factory=list)

    def to_dict(self):
        return {
            "total_points": self.total_points,
            "picks_correct": self.picks_correct,
            "is_complete": self.is_complete,
            "selections": [
                {"match_id": match_id, **score.to_dict()}
                for match_id, score in self.selections
            ],
        }


@dataclass(frozen=True)
class EventPotential(Record):
    max_possible: int = 0
    min_possible: int = 0
    all_favorites: int = 0
    all_underdogs: int = 0


@dataclass(frozen=True)
class EventScore(Record):
    total_points: int = 0
    correct_picks: int = 0
    total_picks: int = 0


@dataclass(frozen=True)
class ValidationResult(Record):
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @property
    def error(self):
        """First error message, or None when valid"""
        return self.errors[0] if self.errors else None

    @classmethod
    def ok(cls):
        return cls(is_valid=True, errors=[])

    @classmethod
    def from_errors(cls, errors):
        return cls(is_valid=not errors, errors=list(errors))

    def to_dict(self):
        data = {"is_valid": self.is_valid, "errors": list(self.errors)}
        if self.error:
            data["error"] = self.error
        return data
