"""Options that control how Chinese names are built."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SurnameType(Enum):
    """Kind of family name to use."""

    SINGLE = "single"
    COMPOUND = "compound"
    MIXED = "mixed"


class Gender(Enum):
    """Gender whose character pool the given name is drawn from."""

    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


class NameLength(Enum):
    """Number of characters in the given name."""

    SINGLE = "single"
    DOUBLE = "double"
    MIXED = "mixed"


_SURNAME_LABELS = {
    SurnameType.SINGLE: "单姓",
    SurnameType.COMPOUND: "复姓",
    SurnameType.MIXED: "混合姓氏",
}

_GENDER_LABELS = {
    Gender.MALE: "男性",
    Gender.FEMALE: "女性",
    Gender.MIXED: "混合性别",
}

_LENGTH_LABELS = {
    NameLength.SINGLE: "单字名",
    NameLength.DOUBLE: "双字名",
    NameLength.MIXED: "混合长度",
}


@dataclass
class ChineseNameConfig:
    """Surname kind, gender, given-name length and how many names to make."""

    surname_type: SurnameType = SurnameType.MIXED
    gender: Gender = Gender.MIXED
    name_length: NameLength = NameLength.MIXED
    count: int = 1

    def description(self) -> str:
        """Human-readable summary such as '单姓 - 男性 - 双字名'."""
        return " - ".join(
            (
                _SURNAME_LABELS[self.surname_type],
                _GENDER_LABELS[self.gender],
                _LENGTH_LABELS[self.name_length],
            )
        )