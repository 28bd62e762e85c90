import io

import pytest
from termcolor import colored

from scanner.line_reporter import LineReporter
from scanner.pattern_matcher import PatternMatcher
from scanner.segments import KeywordSegment, TextSegment

SENTENCE = "这里有一只鸟,那里有一只鱼。"


def test_report_plain():
    out = io.StringIO()
    reporter = LineReporter(out, use_color=False)

    assert reporter.report(PatternMatcher(r"一只"), SENTENCE, 5) is True
    assert out.getvalue() == "5-4,11: 这里有一只鸟,那里有一只鱼。\n"


def test_report_colored():
    out = io.StringIO()
    reporter = LineReporter(out, color="red", force_color=True)

    reporter.report(PatternMatcher(r"一只"), SENTENCE, 5)

    red = colored("一只", "red", force_color=True)
    assert red != "一只"
    assert out.getvalue() == f"5-4,11: 这里有{red}鸟,那里有{red}鱼。\n"


def test_report_no_match_prints_nothing():
    out = io.StringIO()
    reporter = LineReporter(out)

    assert reporter.report(PatternMatcher(r"猫"), SENTENCE, 1) is False
    assert out.getvalue() == ""


def test_format_rejects_unknown_segment():
    reporter = LineReporter(io.StringIO(), use_color=False)
    segments = [KeywordSegment("a", 1), "b"]

    with pytest.raises(TypeError):
        reporter.format(segments, 1)


def test_format_single_keyword():
    reporter = LineReporter(io.StringIO(), use_color=False)

    assert reporter.format([TextSegment("x"), KeywordSegment("y", 2)], 3) == "3-2: xy"


def test_color_follows_no_color_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    out = io.StringIO()
    reporter = LineReporter(out, color="red")

    reporter.report(PatternMatcher(r"一只"), SENTENCE, 5)

    assert out.getvalue() == "5-4,11: 这里有一只鸟,那里有一只鱼。\n"


def test_color_follows_force_color_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    out = io.StringIO()
    reporter = LineReporter(out, color="green")

    reporter.report(PatternMatcher(r"鱼"), SENTENCE, 2)

    green = colored("鱼", "green", force_color=True)
    assert out.getvalue() == f"2-13: 这里有一只鸟,那里有一只{green}。\n"
