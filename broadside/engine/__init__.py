"""Game engine components."""

from .match import ActivePhase, FinishedPhase, Match, Phase, SetupPhase

__all__ = [
    "Match",
    "Phase",
    "SetupPhase",
    "ActivePhase",
    "FinishedPhase",
]
