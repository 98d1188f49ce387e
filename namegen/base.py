"""Common behaviour of all name generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from namegen.console import Console


class NameGenerator(ABC):
    """A source of names in one style."""

    @abstractmethod
    def generate(self) -> str:
        """Return one new name."""

    @abstractmethod
    def style_name(self) -> str:
        """Return the display name of this style."""

    def generate_multiple(self, count: int, console: Optional[Console] = None) -> int:
        """Print `count` numbered names and return how many were produced."""
        console = console if console is not None else Console()
        if count <= 0:
            console.print_error("生成数量必须大于0")
            return 0

        console.print_info(f"生成 {count} 个{self.style_name()}:")
        console.print_line("-")

        produced = 0
        for number in range(1, count + 1):
            try:
                name = self.generate()
            except Exception as exc:
                console.print_error(f"生成第 {number} 个姓名时出错: {exc}")
                continue
            console.println(f"  {number}. {name}")
            produced += 1

        console.print_line("-")
        return produced