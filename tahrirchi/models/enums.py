"""Enumerations shared by the request/response models.

Values are the short codes used on the command line and in serialised
results. Language display names are what the instruction templates refer to.
"""

from __future__ import annotations

from enum import Enum


class Operation(str, Enum):
    """The two analysis modes offered to the user.

    Values:
        GRAMMAR: proofread and correct the text
        SIMPLIFY: rewrite the text at a simpler reading level
    """

    GRAMMAR = "grammar"
    SIMPLIFY = "simplify"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


_DISPLAY_NAMES = {
    "EN": "English",
    "UZ": "Uzbek",
    "RU": "Russian",
    "DE": "German",
    "AR": "Arabic",
    "TR": "Turkish",
    "ZH": "Chinese",
    "ES": "Spanish",
}


class Language(str, Enum):
    """Languages the instructions can be written for."""

    EN = "EN"
    UZ = "UZ"
    RU = "RU"
    DE = "DE"
    AR = "AR"
    TR = "TR"
    ZH = "ZH"
    ES = "ES"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @classmethod
    def parse(cls, value: str | "Language") -> "Language":
        """Return the member for ``value``, accepting codes in any case."""
        if isinstance(value, Language):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown language code: {value!r}") from exc

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
