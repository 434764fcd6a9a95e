from .enums import ContestType, FinishType, Side, WrestlerRole
from .match import Match
from .pick import Pick, Pick6Selection
from .results import (
    BalancedMatchPoints,
    EventPotential,
    EventScore,
    MatchPoints,
    Pick6EntryScore,
    Pick6Score,
    SidedMatchPoints,
    ValidationResult,
)

__all__ = [
    "Side",
    "FinishType",
    "ContestType",
    "WrestlerRole",
    "Match",
    "Pick",
    "Pick6Selection",
    "MatchPoints",
    "BalancedMatchPoints",
    "SidedMatchPoints",
    "Pick6Score",
    "Pick6EntryScore",
    "EventPotential",
    "EventScore",
    "ValidationResult",
]
