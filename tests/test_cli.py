import io
import re

import pytest

from namegen.chinese import (
    COMPOUND_SURNAMES,
    FEMALE_SINGLE_CHARS,
    MALE_DOUBLE_NAMES,
    MALE_SINGLE_CHARS,
    SINGLE_SURNAMES,
)
from namegen.cli import (
    MainMenuOption,
    generate_all_styles,
    generate_non_chinese_names,
    main,
    run_chinese_flow,
)
from namegen.config import SurnameType
from namegen.console import Console
from namegen.english import FEMALE_FIRST_NAMES, LAST_NAMES, MALE_FIRST_NAMES
from namegen.japanese import FEMALE_GIVEN_NAMES, MALE_GIVEN_NAMES, SURNAMES

_NAME_LINE = re.compile(r"^  (\d+)\. (.+)$", re.MULTILINE)


def _console(text):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out), out


def _names(output):
    return [(int(n), name) for n, name in _NAME_LINE.findall(output)]


def _split_japanese(name):
    for surname in SURNAMES:
        rest = name[len(surname):]
        if name.startswith(surname) and rest in MALE_GIVEN_NAMES + FEMALE_GIVEN_NAMES:
            return surname, rest
    return None


def test_english_names_are_listed_and_numbered():
    console, out = _console("3\n\n")
    generate_non_chinese_names(console, MainMenuOption.ENGLISH_NAME)
    output = out.getvalue()
    assert "生成 3 个英文名:" in output
    names = _names(output)
    assert [n for n, _ in names] == [1, 2, 3]
    for _, name in names:
        first, last = name.split(" ")
        assert first in MALE_FIRST_NAMES + FEMALE_FIRST_NAMES
        assert last in LAST_NAMES
    assert "按任意键继续..." in output


def test_japanese_names_are_built_from_pools():
    console, out = _console("2\n\n")
    generate_non_chinese_names(console, MainMenuOption.JAPANESE_NAME)
    output = out.getvalue()
    assert "生成 2 个日文名:" in output
    names = _names(output)
    assert len(names) == 2
    for _, name in names:
        assert _split_japanese(name) is not None


def test_non_chinese_rejects_other_option():
    console, out = _console("\n")
    generate_non_chinese_names(console, MainMenuOption.ALL_STYLES)
    output = out.getvalue()
    assert "无效的选项" in output
    assert _names(output) == []


def test_count_out_of_range_is_retried():
    console, out = _console("11\n0\n1\n\n")
    generate_non_chinese_names(console, MainMenuOption.ENGLISH_NAME)
    output = out.getvalue()
    assert output.count("请输入介于 1 和 10 之间的数字") == 2
    assert len(_names(output)) == 1


def test_all_styles_prints_each_style_in_order():
    console, out = _console("2\n\n")
    generate_all_styles(console)
    output = out.getvalue()
    positions = [output.index(f"生成 2 个{style}:") for style in ("中文名", "英文名", "日文名")]
    assert positions == sorted(positions)
    assert len(_names(output)) == 6


def test_chinese_flow_back_at_gender_generates_nothing():
    console, out = _console("0\n")
    run_chinese_flow(console, SurnameType.SINGLE)
    output = out.getvalue()
    assert "请选择性别:" in output
    assert _names(output) == []


def test_chinese_flow_male_double_single_surname():
    console, out = _console("1\n2\n3\n0\n")
    run_chinese_flow(console, SurnameType.SINGLE)
    output = out.getvalue()
    assert "生成 3 个单姓 - 男性 - 双字名:" in output
    names = _names(output)
    assert len(names) == 3
    for _, name in names:
        assert len(name) == 3
        assert name[0] in SINGLE_SURNAMES
        given = name[1:]
        assert given in MALE_DOUBLE_NAMES or (
            given[0] in MALE_SINGLE_CHARS and given[1] in MALE_SINGLE_CHARS
        )


def test_chinese_flow_female_single_compound_surname():
    console, out = _console("2\n1\n4\n0\n")
    run_chinese_flow(console, SurnameType.COMPOUND)
    output = out.getvalue()
    assert "生成 4 个复姓 - 女性 - 单字名:" in output
    names = _names(output)
    assert len(names) == 4
    for _, name in names:
        assert name[:2] in COMPOUND_SURNAMES
        assert name[2:] in FEMALE_SINGLE_CHARS


def test_chinese_flow_continue_keeps_configuration():
    console, out = _console("1\n1\n2\n1\n3\n0\n")
    run_chinese_flow(console, SurnameType.SINGLE)
    output = out.getvalue()
    assert "生成 2 个单姓 - 男性 - 单字名:" in output
    assert "生成 3 个单姓 - 男性 - 单字名:" in output
    assert len(_names(output)) == 5


def test_chinese_flow_reconfigure_returns_to_length_menu():
    console, out = _console("1\n1\n1\n2\n2\n1\n0\n")
    run_chinese_flow(console, SurnameType.SINGLE)
    output = out.getvalue()
    first = output.index("生成 1 个单姓 - 男性 - 单字名:")
    second = output.index("生成 1 个单姓 - 男性 - 双字名:")
    assert first < second
    assert output.count("请选择性别:") == 1


def test_chinese_flow_back_from_length_returns_to_gender():
    console, out = _console("1\n0\n0\n")
    run_chinese_flow(console, SurnameType.SINGLE)
    output = out.getvalue()
    assert output.count("请选择性别:") == 2
    assert output.count("请选择名字长度:") == 1
    assert _names(output) == []


@pytest.mark.parametrize("text", ["0\n", "9\n0\n"])
def test_main_exits_with_goodbye(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "感谢使用，再见！" in output


def test_main_reports_out_of_range_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\nabc\n0\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "请输入介于 0 和 5 之间的数字" in output
    assert "无效输入，请输入一个数字" in output


def test_main_dispatches_to_english(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n\n0\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "生成 1 个英文名:" in output
    assert len(_names(output)) == 1


def test_main_ends_cleanly_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "感谢使用，再见！" not in capsys.readouterr().out