"""Tests for the high-level Mirador API."""


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_heading(self) -> None:
        """Test parsing a heading."""
        from mirador import Heading, parse

        blocks = parse("# Hello World")
        assert len(blocks) == 1
        assert isinstance(blocks[0], Heading)
        assert blocks[0].level == 1

    def test_parse_paragraph(self) -> None:
        """Test parsing a paragraph."""
        from mirador import Paragraph, parse

        blocks = parse("Hello World")
        assert len(blocks) == 1
        assert isinstance(blocks[0], Paragraph)

    def test_parse_returns_tuple(self) -> None:
        """Blocks come back as an immutable tuple."""
        from mirador import parse

        assert isinstance(parse("a\n\nb"), tuple)

    def test_parse_never_raises_on_odd_input(self) -> None:
        """Malformed input degrades instead of raising."""
        from mirador import parse

        for source in ["```", "|", "| |\n|", ">", "#", "***", "[](", "<", "![](", "\r\n\r\n"]:
            parse(source)


class TestHighlightFunction:
    """Tests for the highlight() function."""

    def test_highlight_python(self) -> None:
        """Test tokenizing a call with a string argument."""
        from mirador import SyntaxRole, highlight

        runs = highlight('print("hi")', "python")
        assert [(r.start, r.end, r.role) for r in runs] == [
            (0, 5, SyntaxRole.FUNCTION),
            (5, 6, SyntaxRole.PLAIN),
            (6, 10, SyntaxRole.STRING),
            (10, 11, SyntaxRole.PLAIN),
        ]

    def test_highlight_code_block_language(self) -> None:
        """Code blocks carry the language highlight() expects."""
        from mirador import CodeBlock, highlight, parse

        (block,) = parse("```rust\nfn main() {}\n```")
        assert isinstance(block, CodeBlock)
        roles = {run.role.name for run in highlight(block.code, block.language)}
        assert {"KEYWORD", "FUNCTION"} <= roles


class TestMarkdownClass:
    """Tests for the Markdown class."""

    def test_markdown_parse(self) -> None:
        """Test Markdown.parse()."""
        from mirador import Markdown, Paragraph, ParseConfig

        md = Markdown(config=ParseConfig(strip_html=False))
        (block,) = md.parse("<b>kept</b>")
        assert isinstance(block, Paragraph)
        assert block.content.plain_text == "<b>kept</b>"

    def test_markdown_parse_many(self) -> None:
        """Test Markdown.parse_many()."""
        from mirador import Markdown

        results = Markdown().parse_many(["# One", "# Two"])
        assert len(results) == 2

    def test_markdown_outline(self) -> None:
        """Test Markdown.outline()."""
        from mirador import Markdown

        entries = Markdown().outline("# One\n\n## Two")
        assert [(e.level, e.slug) for e in entries] == [(1, "one"), (2, "two")]

    def test_markdown_instance_reusable(self) -> None:
        """One instance gives the same result for the same input."""
        from mirador import Markdown

        md = Markdown()
        assert md.parse("# x\n\n- a") == md.parse("# x\n\n- a")
