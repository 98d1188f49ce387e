"""Interactive menu-driven front end for the name generators."""

from __future__ import annotations

import argparse
from enum import Enum, IntEnum
from typing import Callable, Optional, Sequence

from namegen.base import NameGenerator
from namegen.chinese import ChineseNameGenerator
from namegen.config import ChineseNameConfig, Gender, NameLength, SurnameType
from namegen.console import Console
from namegen.english import EnglishNameGenerator
from namegen.japanese import JapaneseNameGenerator


class MainMenuOption(IntEnum):
    EXIT = 0
    CHINESE_SINGLE = 1
    CHINESE_COMPOUND = 2
    ENGLISH_NAME = 3
    JAPANESE_NAME = 4
    ALL_STYLES = 5


class GenderMenuOption(IntEnum):
    BACK = 0
    MALE = 1
    FEMALE = 2
    MIXED = 3


class LengthMenuOption(IntEnum):
    BACK = 0
    SINGLE = 1
    DOUBLE = 2
    MIXED = 3


class PostGenerateOption(IntEnum):
    BACK_TO_MAIN = 0
    CONTINUE_GENERATE = 1
    RECONFIGURE = 2


class _Level(Enum):
    MAIN = "main"
    GENDER = "gender"
    NAME_LENGTH = "name_length"
    COUNT = "count"


_SURNAME_LABELS = {
    SurnameType.SINGLE: "单姓",
    SurnameType.COMPOUND: "复姓",
    SurnameType.MIXED: "混合",
}

_GENDER_LABELS = {
    Gender.MALE: "男性",
    Gender.FEMALE: "女性",
    Gender.MIXED: "混合",
}

_LENGTH_LABELS = {
    NameLength.SINGLE: "单字名",
    NameLength.DOUBLE: "双字名",
    NameLength.MIXED: "混合",
}

_GENDER_CHOICES = {
    GenderMenuOption.MALE: Gender.MALE,
    GenderMenuOption.FEMALE: Gender.FEMALE,
    GenderMenuOption.MIXED: Gender.MIXED,
}

_LENGTH_CHOICES = {
    LengthMenuOption.SINGLE: NameLength.SINGLE,
    LengthMenuOption.DOUBLE: NameLength.DOUBLE,
    LengthMenuOption.MIXED: NameLength.MIXED,
}

_NON_CHINESE_STYLES: dict[MainMenuOption, tuple[Callable[[], NameGenerator], str]] = {
    MainMenuOption.ENGLISH_NAME: (EnglishNameGenerator, "英文名"),
    MainMenuOption.JAPANESE_NAME: (JapaneseNameGenerator, "日文名"),
}


def _display_main_menu(console: Console) -> None:
    console.clear_screen()
    console.print_header("多风格姓名生成器")
    console.println("")
    console.println("请选择姓名风格:")
    console.print_menu_option(MainMenuOption.CHINESE_SINGLE, "生成中文名（单姓）")
    console.print_menu_option(MainMenuOption.CHINESE_COMPOUND, "生成中文名（复姓）")
    console.print_menu_option(MainMenuOption.ENGLISH_NAME, "生成英文名")
    console.print_menu_option(MainMenuOption.JAPANESE_NAME, "生成日文名")
    console.print_menu_option(MainMenuOption.ALL_STYLES, "生成全部风格")
    console.println("")
    console.print_menu_option(MainMenuOption.EXIT, "退出程序")
    console.print_line("-")


def _display_gender_menu(console: Console, surname_label: str) -> None:
    console.clear_screen()
    console.print_header("选择性别 - " + surname_label)
    console.println("")
    console.println("请选择性别:")
    console.print_menu_option(GenderMenuOption.MALE, "男性")
    console.print_menu_option(GenderMenuOption.FEMALE, "女性")
    console.print_menu_option(GenderMenuOption.MIXED, "混合（随机）")
    console.println("")
    console.print_menu_option(GenderMenuOption.BACK, "返回上一级")
    console.print_line("-")


def _display_length_menu(console: Console, surname_label: str, gender_label: str) -> None:
    console.clear_screen()
    console.print_header(f"选择名字长度 - {surname_label} - {gender_label}")
    console.println("")
    console.println("请选择名字长度:")
    console.print_menu_option(LengthMenuOption.SINGLE, "单字名")
    console.print_menu_option(LengthMenuOption.DOUBLE, "双字名")
    console.print_menu_option(LengthMenuOption.MIXED, "混合（随机）")
    console.println("")
    console.print_menu_option(LengthMenuOption.BACK, "返回上一级")
    console.print_line("-")


def _display_count_menu(console: Console, description: str) -> None:
    console.clear_screen()
    console.print_header("设置生成数量 - " + description)
    console.println("")
    console.print_line("-")


def _display_post_generate_menu(console: Console) -> None:
    console.println("")
    console.println("请选择下一步操作:")
    console.print_menu_option(PostGenerateOption.CONTINUE_GENERATE, "继续生成（相同配置）")
    console.print_menu_option(PostGenerateOption.RECONFIGURE, "重新配置")
    console.print_menu_option(PostGenerateOption.BACK_TO_MAIN, "返回主菜单")
    console.print_line("-")


def generate_non_chinese_names(console: Console, option: MainMenuOption) -> None:
    """Ask for a count and print that many English or Japanese names."""
    console.clear_screen()
    style = _NON_CHINESE_STYLES.get(option)
    if style is None:
        console.print_error("无效的选项")
        console.pause()
        return

    factory, style_label = style
    generator = factory()
    console.print_header("生成" + style_label)
    count = console.get_int_input("请输入要生成的姓名数量 (1-10): ", 1, 10)
    console.println("")

    generator.generate_multiple(count, console)

    console.println("")
    console.pause()


def generate_all_styles(console: Console) -> None:
    """Ask for a count and print that many names in every style."""
    console.clear_screen()
    count = console.get_int_input("请输入每种风格要生成的姓名数量 (1-10): ", 1, 10)
    console.println("")

    generators: list[NameGenerator] = [
        ChineseNameGenerator(),
        EnglishNameGenerator(),
        JapaneseNameGenerator(),
    ]
    for generator in generators:
        console.print_line("=", 50)
        generator.generate_multiple(count, console)
        console.println("")

    console.println("")
    console.pause()


def run_chinese_flow(console: Console, surname_type: SurnameType) -> None:
    """Walk through the gender, length and count menus for Chinese names."""
    generator = ChineseNameGenerator()
    config = ChineseNameConfig(surname_type=surname_type)
    surname_label = _SURNAME_LABELS[surname_type]

    level = _Level.GENDER
    while level is not _Level.MAIN:
        if level is _Level.GENDER:
            _display_gender_menu(console, surname_label)
            choice = GenderMenuOption(console.get_int_input("请输入选项 (0-3): ", 0, 3))
            if choice is GenderMenuOption.BACK:
                level = _Level.MAIN
            else:
                config.gender = _GENDER_CHOICES[choice]
                level = _Level.NAME_LENGTH

        elif level is _Level.NAME_LENGTH:
            _display_length_menu(console, surname_label, _GENDER_LABELS[config.gender])
            choice = LengthMenuOption(console.get_int_input("请输入选项 (0-3): ", 0, 3))
            if choice is LengthMenuOption.BACK:
                level = _Level.GENDER
            else:
                config.name_length = _LENGTH_CHOICES[choice]
                level = _Level.COUNT

        else:
            description = " - ".join(
                (surname_label, _GENDER_LABELS[config.gender], _LENGTH_LABELS[config.name_length])
            )
            _display_count_menu(console, description)
            config.count = console.get_int_input("请输入要生成的姓名数量 (1-10): ", 1, 10)

            console.println("")
            generator.generate_multiple_with_config(config, console)

            _display_post_generate_menu(console)
            post = PostGenerateOption(console.get_int_input("请输入选项 (0-2): ", 0, 2))
            if post is PostGenerateOption.CONTINUE_GENERATE:
                level = _Level.COUNT
            elif post is PostGenerateOption.RECONFIGURE:
                level = _Level.NAME_LENGTH
            else:
                level = _Level.MAIN


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive name generator until the user chooses to exit."""
    parser = argparse.ArgumentParser(prog="namegen", description="Multi-style name generator")
    parser.parse_args(argv)

    console = Console()
    try:
        while True:
            _display_main_menu(console)
            choice = MainMenuOption(console.get_int_input("请输入选项 (0-5): ", 0, 5))

            if choice is MainMenuOption.CHINESE_SINGLE:
                run_chinese_flow(console, SurnameType.SINGLE)
            elif choice is MainMenuOption.CHINESE_COMPOUND:
                run_chinese_flow(console, SurnameType.COMPOUND)
            elif choice in (MainMenuOption.ENGLISH_NAME, MainMenuOption.JAPANESE_NAME):
                generate_non_chinese_names(console, choice)
            elif choice is MainMenuOption.ALL_STYLES:
                generate_all_styles(console)
            else:
                console.print_info("感谢使用，再见！")
                return 0
    except (EOFError, KeyboardInterrupt):
        console.println("")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())