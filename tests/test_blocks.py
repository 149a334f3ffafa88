"""Tests for the line-oriented block parser."""

import pytest

from mirador import ParseConfig, parse, parse_config_context
from mirador.nodes import (
    Blockquote,
    Bold,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineContent,
    Italic,
    MermaidDiagram,
    OrderedList,
    Paragraph,
    TaskItem,
    TaskList,
    Text,
    UnorderedList,
)
from mirador.parser import Parser, split_lines
from mirador.parsing.blocks import heading_level, is_horizontal_rule


def inline(text: str) -> InlineContent:
    return InlineContent((Text(text),))


class TestSplitLines:
    def test_trailing_newline_adds_no_line(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_carriage_returns_dropped(self) -> None:
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_empty(self) -> None:
        assert split_lines("") == []


class TestHeadingAndParagraph:
    def test_heading_then_paragraph(self) -> None:
        blocks = parse("# Title\n\nSome **bold** and *italic* text.")
        assert blocks == (
            Heading(level=1, content=inline("Title")),
            Paragraph(
                content=InlineContent(
                    (Text("Some "), Bold("bold"), Text(" and "), Italic("italic"), Text(" text."))
                )
            ),
        )

    @pytest.mark.parametrize(("line", "level"), [("# a", 1), ("### a", 3), ("######## a", 6)])
    def test_heading_level_capped(self, line: str, level: int) -> None:
        assert heading_level(line) == level
        (block,) = parse(line)
        assert isinstance(block, Heading)
        assert block.level == level

    def test_paragraph_lines_joined_with_space(self) -> None:
        assert parse("line one\nline two") == (Paragraph(content=inline("line one line two")),)

    def test_blank_line_splits_paragraphs(self) -> None:
        assert parse("one\n\ntwo") == (
            Paragraph(content=inline("one")),
            Paragraph(content=inline("two")),
        )

    @pytest.mark.parametrize(
        "follower",
        ["# Head", "> quote", "---", "- item", "1. item", "```", "![a](u)"],
    )
    def test_paragraph_stops_at_block_start(self, follower: str) -> None:
        blocks = parse(f"para\n{follower}")
        assert blocks[0] == Paragraph(content=inline("para"))
        assert len(blocks) == 2


class TestFences:
    def test_code_block(self) -> None:
        assert parse("```python\nx = 1\n```") == (CodeBlock(language="python", code="x = 1"),)

    def test_no_language(self) -> None:
        assert parse("```\ncode\n```") == (CodeBlock(language=None, code="code"),)

    def test_unterminated_fence_closes_at_end(self) -> None:
        assert parse("```python\nprint(1)") == (CodeBlock(language="python", code="print(1)"),)
        assert parse("```python\nprint(1)\n") == (CodeBlock(language="python", code="print(1)"),)

    def test_content_kept_verbatim(self) -> None:
        (block,) = parse("```\n# not a heading\n\n- not a list\n```")
        assert block == CodeBlock(language=None, code="# not a heading\n\n- not a list")

    @pytest.mark.parametrize("language", ["mermaid", "Mermaid", "MERMAID"])
    def test_mermaid(self, language: str) -> None:
        assert parse(f"```{language}\ngraph TD\n```") == (MermaidDiagram(code="graph TD"),)

    def test_unterminated_mermaid_is_code(self) -> None:
        assert parse("```mermaid\ngraph TD") == (CodeBlock(language="mermaid", code="graph TD"),)
        assert parse("```Mermaid\ngraph TD\n") == (CodeBlock(language="Mermaid", code="graph TD"),)

    def test_mermaid_disabled(self) -> None:
        with parse_config_context(ParseConfig(mermaid_enabled=False)):
            blocks = parse("```mermaid\ngraph TD\n```")
        assert blocks == (CodeBlock(language="mermaid", code="graph TD"),)


class TestBlockquote:
    def test_contiguous_lines_joined(self) -> None:
        assert parse("> a\n> b") == (Blockquote(content=inline("a\nb")),)

    def test_quote_ends_at_other_line(self) -> None:
        blocks = parse("> a\nb")
        assert blocks == (Blockquote(content=inline("a")), Paragraph(content=inline("b")))


class TestHorizontalRule:
    @pytest.mark.parametrize("line", ["---", "***", "___", "- - -", "*****"])
    def test_rules(self, line: str) -> None:
        assert is_horizontal_rule(line)

    @pytest.mark.parametrize("line", ["--", "-*-", "***bold***", "--- x", "--- title"])
    def test_not_rules(self, line: str) -> None:
        assert not is_horizontal_rule(line)

    def test_dash_prefixed_line_is_paragraph(self) -> None:
        assert parse("--- title") == (Paragraph(content=inline("--- title")),)

    def test_ordinals_count_up_and_reset(self) -> None:
        source = "---\n\n***\n\n___"
        expected = (HorizontalRule(0), HorizontalRule(1), HorizontalRule(2))
        assert parse(source) == expected
        assert parse(source) == expected


class TestLists:
    def test_task_list(self) -> None:
        assert parse("- [ ] todo\n- [x] done") == (
            TaskList(
                items=(
                    TaskItem(checked=False, content=inline("todo")),
                    TaskItem(checked=True, content=inline("done")),
                )
            ),
        )

    def test_capital_x_is_checked(self) -> None:
        (block,) = parse("* [X] shipped")
        assert isinstance(block, TaskList)
        assert block.items[0].checked is True

    def test_task_lists_disabled(self) -> None:
        with parse_config_context(ParseConfig(task_lists_enabled=False)):
            blocks = parse("- [ ] todo")
        assert blocks == (UnorderedList(items=(inline("[ ] todo"),)),)

    def test_unordered_markers(self) -> None:
        assert parse("- a\n* b\n+ c") == (UnorderedList(items=(inline("a"), inline("b"), inline("c"))),)

    def test_ordered_numerals_dropped(self) -> None:
        assert parse("1. one\n2. two\n10. ten") == (
            OrderedList(items=(inline("one"), inline("two"), inline("ten"))),
        )

    def test_list_kinds_split(self) -> None:
        blocks = parse("- a\n1. b")
        assert [type(b) for b in blocks] == [UnorderedList, OrderedList]


class TestHtmlAndImages:
    def test_centered_logo_readme(self) -> None:
        source = (
            '<p align="center">\n'
            '  <img src="logo.png" alt="Logo" width="100">\n'
            "</p>\n"
            "\n"
            "Hello <b>World</b>"
        )
        assert parse(source) == (
            Image(alt="Logo", url="logo.png", ordinal=0),
            Paragraph(content=inline("Hello World")),
        )

    def test_comment_lines_dropped(self) -> None:
        assert parse("<!-- hidden -->\ntext") == (Paragraph(content=inline("text")),)

    def test_html_only_line_dropped_inside_paragraph(self) -> None:
        assert parse("one\n<br/>\ntwo") == (Paragraph(content=inline("one two")),)

    def test_markdown_image_line(self) -> None:
        assert parse("![Alt text](img.png)") == (Image(alt="Alt text", url="img.png", ordinal=0),)

    def test_image_ordinals_shared_between_forms(self) -> None:
        blocks = parse('![a](1.png)\n<img src="2.png">\n![c](3.png)')
        assert [b.ordinal for b in blocks if isinstance(b, Image)] == [0, 1, 2]

    def test_inline_image_in_text_is_not_image_block(self) -> None:
        (block,) = parse("see ![a](u) here")
        assert isinstance(block, Paragraph)

    def test_strip_html_disabled_keeps_tags(self) -> None:
        with parse_config_context(ParseConfig(strip_html=False)):
            blocks = parse("Hello <b>World</b>")
        assert blocks == (Paragraph(content=inline("Hello <b>World</b>")),)


class TestParserInstance:
    def test_parser_returns_list(self) -> None:
        blocks = Parser("# a\n\nb").parse()
        assert isinstance(blocks, list)
        assert len(blocks) == 2

    def test_empty_source(self) -> None:
        assert parse("") == ()
        assert parse("\n\n   \n") == ()

    def test_text_transformer_applied(self) -> None:
        with parse_config_context(ParseConfig(text_transformer=str.upper)):
            blocks = parse("# hi\n\nthere")
        assert blocks == (
            Heading(level=1, content=inline("HI")),
            Paragraph(content=inline("THERE")),
        )
