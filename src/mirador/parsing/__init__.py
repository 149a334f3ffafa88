"""Parser mixins for Mirador.

The Parser class composes these mixins:
- InlineParsingMixin: inline span resolution
- TableParsingMixin: pipe tables
- BlockParsingMixin: headings, quotes, lists, paragraphs
"""

from mirador.parsing.blocks import BlockParsingMixin
from mirador.parsing.inline import InlineParsingMixin, parse_inline
from mirador.parsing.table import TableParse, TableParsingMixin, parse_table

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
    "TableParse",
    "TableParsingMixin",
    "parse_inline",
    "parse_table",
]
