"""Tests for plain-text extraction."""

import pytest

from mirador import parse, plain_text
from mirador.nodes import Bold, HorizontalRule, InlineContent, Link, TaskItem, Text


class TestPlainText:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("# Hello **World**", "Hello World"),
            ("Some `code` and [a link](u)", "Some code and a link"),
            ("> quoted *text*", "quoted text"),
            ("- a\n- **b**", "a\nb"),
            ("1. one\n2. two", "one\ntwo"),
            ("- [x] done\n- [ ] todo", "done\ntodo"),
            ("```py\nx = 1\ny = 2\n```", "x = 1\ny = 2"),
            ("```mermaid\ngraph TD\n```", "graph TD"),
            ("| A | B |\n|---|---|\n| 1 | 2 |", "A\tB\n1\t2"),
            ("![alt text](u.png)", "alt text"),
            ("---", ""),
        ],
    )
    def test_blocks(self, source: str, expected: str) -> None:
        (block,) = parse(source)
        assert plain_text(block) == expected

    def test_segments_and_content(self) -> None:
        assert plain_text(Bold("b")) == "b"
        assert plain_text(Link("text", "https://x")) == "text"
        assert plain_text(InlineContent((Text("a"), Bold("b")))) == "ab"
        assert plain_text(TaskItem(checked=True, content=InlineContent((Text("t"),)))) == "t"

    def test_rule_has_no_text(self) -> None:
        assert plain_text(HorizontalRule(0)) == ""
