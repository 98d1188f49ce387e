"""English first-name and surname combinations."""

from __future__ import annotations

from typing import Optional

from namegen.base import NameGenerator
from namegen.rng import Random

MALE_FIRST_NAMES: tuple[str, ...] = tuple(
    """
    James John Robert Michael William David Richard Joseph Thomas Christopher Daniel
    Paul Mark Donald George Kenneth Steven Edward Brian Ronald Anthony Kevin Jason
    Matthew Gary Timothy Jose Larry Jeffrey Frank Scott Eric Stephen Andrew Raymond
    Gregory Joshua Jerry Dennis Walter Patrick Peter Harold Douglas Carl Arthur Ryan
    Roger Joe Juan Jack Albert Jonathan Justin Terry Gerald Keith Samuel Willie Ralph
    Lawrence Nicholas Roy Benjamin Bruce Brandon Adam Harry Fred Wayne Billy Steve
    Louis Jeremy Aaron Randy Howard Eugene Carlos Russell Bobby Victor Martin Ernest
    Phillip Todd Jesse Craig Alan Shawn Clarence Sean Philip Chris Johnny Earl Jimmy
    Antonio Danny Bryan Tony Luis Mike Stanley
    """.split()
)

FEMALE_FIRST_NAMES: tuple[str, ...] = tuple(
    """
    Mary Patricia Jennifer Linda Barbara Elizabeth Susan Jessica Sarah Karen Nancy
    Lisa Margaret Betty Dorothy Sandra Ashley Kimberly Donna Emily Michelle Carol
    Amanda Melissa Deborah Stephanie Rebecca Sharon Laura Cynthia Kathleen Amy Angela
    Shirley Brenda Pamela Nicole Emma Samantha Katherine Christine Helen Debra Rachel
    Carolyn Janet Catherine Heather Diane Julie Joyce Virginia Victoria Kelly Christina
    Lauren Joan Evelyn Judith Megan Cheryl Andrea Hannah Jacqueline Martha Gloria
    Teresa Ann Sara Madison Frances Kathryn Janice Julia Grace Monica Judy Abigail
    Sophia Rose Beverly Denise Theresa Tammy Irene Jane Lori Rachelle Marilyn Amber
    Danielle Brittany Diana Abby Fiona Ella Natalie Olivia Ava Sophie Chloe Isabella
    Mia Zoe
    """.split()
)

LAST_NAMES: tuple[str, ...] = tuple(
    """
    Smith Johnson Williams Brown Jones Garcia Miller Davis Rodriguez Martinez Hernandez
    Lopez Gonzalez Wilson Anderson Thomas Taylor Moore Jackson Martin Lee Perez
    Thompson White Harris Sanchez Clark Ramirez Lewis Robinson Walker Young Allen King
    Wright Scott Torres Nguyen Hill Flores Green Adams Nelson Baker Hall Rivera
    Campbell Mitchell Carter Roberts Gomez Phillips Evans Turner Diaz Parker Cruz
    Edwards Collins Reyes Stewart Morris Morales Murphy Cook Rogers Gutierrez Ortiz
    Morgan Cooper Peterson Bailey Reed Kelly Howard Ramos Kim Cox Ward Richardson
    Watson Brooks Chavez Wood James Bennett Gray Mendoza Ruiz Hughes Price Alvarez
    Castillo Sanders Patel Myers Long Ross Foster Jimenez Powell Jenkins Perry Russell
    Sullivan
    """.split()
)


class EnglishNameGenerator(NameGenerator):
    """Builds 'First Last' names, the first name male or female at even odds."""

    def __init__(self, rng: Optional[Random] = None) -> None:
        self._rng = rng

    @property
    def _random(self) -> Random:
        return self._rng if self._rng is not None else Random.instance()

    def generate(self) -> str:
        first = self._first_name()
        last = self._random.choice(LAST_NAMES)
        return f"{first} {last}"

    def style_name(self) -> str:
        return "英文名"

    def _first_name(self) -> str:
        rng = self._random
        if rng.next_double() < 0.5:
            return rng.choice(MALE_FIRST_NAMES)
        return rng.choice(FEMALE_FIRST_NAMES)