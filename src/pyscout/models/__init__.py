"""Data records exchanged with the scoring engine."""

from .attributes import AttributeInput, DominantFoot, Recommendation, Verdict

__all__ = ["AttributeInput", "DominantFoot", "Recommendation", "Verdict"]
