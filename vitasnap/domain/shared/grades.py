"""
Grade classifications shared across contexts.

Nutri-Score letters and NOVA processing groups as published by
OpenFoodFacts, with tolerant parsing of raw payload values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class NutriscoreGrade(str, Enum):
    """Nutriscore grade classification."""

    A = "a"  # Best
    B = "b"
    C = "c"
    D = "d"
    E = "e"  # Worst
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Any) -> Optional[NutriscoreGrade]:
        """Parse a raw grade value.

        Args:
            raw: Letter as found in payloads (any case, may be padded)

        Returns:
            Matching grade, UNKNOWN for unrecognized text,
            None when no value was given

        Example:
            >>> NutriscoreGrade.parse(" B ")
            <NutriscoreGrade.B: 'b'>
            >>> NutriscoreGrade.parse("not-applicable")
            <NutriscoreGrade.UNKNOWN: 'unknown'>
        """
        if raw is None:
            return None
        if isinstance(raw, NutriscoreGrade):
            return raw
        text = str(raw).strip().lower()
        if not text:
            return None
        try:
            return cls(text)
        except ValueError:
            return cls.UNKNOWN

    def is_official(self) -> bool:
        """Whether this grade carries an actual A-E letter."""
        return self is not NutriscoreGrade.UNKNOWN

    def score(self) -> int:
        """Fixed 0-100 score for an official letter.

        Returns:
            A=100, B=75, C=50, D=25, E=0

        Raises:
            ValueError: For UNKNOWN
        """
        scores = {
            NutriscoreGrade.A: 100,
            NutriscoreGrade.B: 75,
            NutriscoreGrade.C: 50,
            NutriscoreGrade.D: 25,
            NutriscoreGrade.E: 0,
        }
        if self not in scores:
            raise ValueError("Grade UNKNOWN has no score")
        return scores[self]

    @property
    def letter(self) -> str:
        """Upper-case display letter."""
        return self.value.upper() if self.is_official() else "?"


class NovaGroup(str, Enum):
    """NOVA food processing classification."""

    GROUP_1 = "1"  # Unprocessed or minimally processed
    GROUP_2 = "2"  # Processed culinary ingredients
    GROUP_3 = "3"  # Processed foods
    GROUP_4 = "4"  # Ultra-processed foods
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Any) -> Optional[NovaGroup]:
        """Parse a raw NOVA value (int, float or numeric string).

        Example:
            >>> NovaGroup.parse(4)
            <NovaGroup.GROUP_4: '4'>
            >>> NovaGroup.parse("4.0")
            <NovaGroup.GROUP_4: '4'>
            >>> NovaGroup.parse(99)
            <NovaGroup.UNKNOWN: 'unknown'>
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, NovaGroup):
            return raw
        text = str(raw).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return cls.UNKNOWN
        if not number.is_integer():
            return cls.UNKNOWN
        try:
            return cls(str(int(number)))
        except ValueError:
            return cls.UNKNOWN

    def as_int(self) -> Optional[int]:
        """Group number, or None for UNKNOWN."""
        if self is NovaGroup.UNKNOWN:
            return None
        return int(self.value)
