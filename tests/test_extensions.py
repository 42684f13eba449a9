"""Tests for builtin extensions and the extension dispatch protocol."""

from __future__ import annotations

import pytest

from publication import (
    BOLD,
    ITALICS,
    LIST,
    LIST_ITEM,
    Bold,
    Extension,
    ExtensionBlock,
    ExtensionBlocks,
    ExtensionElement,
    HtmlEmitter,
    Italics,
    Lists,
    Paragraph,
    Parser,
    Tag,
    Text,
)
from publication.extensions import create_registry

DOLLARS = Tag("DOLLARS")
QUOTE = Tag("QUOTE")
SEEN = Tag("SEEN")
RULE = Tag("RULE")


class Dollars(Extension):
    """``$$inline$$`` content, defined entirely outside the package."""

    name = "dollars"
    tags = (DOLLARS,)

    def parse_element(self, parser):
        if parser.peek_many(2) != "$$":
            return None
        parser.take_many(2)
        content = []
        while not parser.is_at_end() and parser.peek_many(2) != "$$":
            content.append(parser.take())
        parser.take_many(2)
        return ExtensionElement(DOLLARS, Text("".join(content)))


class Quote(Extension):
    """``>`` blocks whose content is parsed by re-entering the element loop."""

    name = "quote"
    tags = (QUOTE,)

    def parse_block(self, parser):
        if parser.peek() != ">":
            return None
        parser.take()
        parser.skip_whitespace()
        return ExtensionBlock(QUOTE, parser.parse_elements())


class Greedy(Extension):
    """Consumes input on every trial, then declines."""

    name = "greedy"

    def parse_block(self, parser):
        parser.take_many(3)
        return None

    def parse_element(self, parser):
        parser.take_many(3)
        return None


class SeesAbc(Extension):
    """Matches ``abc`` and records the offset each trial started at."""

    name = "sees-abc"
    tags = (SEEN,)

    def __init__(self) -> None:
        self.trial_offsets: list[int] = []

    def parse_element(self, parser):
        self.trial_offsets.append(parser.offset)
        if parser.peek_many(3) != "abc":
            return None
        return ExtensionElement(SEEN, Text(parser.take_many(3)))


class Rule(Extension):
    """``---`` ends the current block and is then consumed as its own block."""

    name = "rule"
    tags = (RULE,)

    def parse_block(self, parser):
        if parser.peek_many(3) != "---":
            return None
        parser.take_many(3)
        return ExtensionBlock(RULE, ())

    def sees_end_of_block(self, parser):
        return parser.peek_many(3) == "---"


def _parse(source: str, *extensions: Extension) -> tuple:
    parser = Parser(source, registry=create_registry(extensions=extensions))
    return parser.parse()


def _item(*contents: str) -> ExtensionBlock:
    return ExtensionBlock(LIST_ITEM, tuple(Text(c) for c in contents))


class TestBold:
    """``*bold*`` emphasis."""

    def test_bold_in_sentence(self) -> None:
        blocks = _parse("This *isn't* Markdown!", Bold())
        assert blocks == (
            Paragraph(
                (
                    Text("This "),
                    ExtensionElement(BOLD, Text("isn't")),
                    Text(" Markdown!"),
                )
            ),
        )

    def test_bold_html(self) -> None:
        parser = Parser("\n  This *isn't* Markdown!\n").add_extension(Bold())
        assert parser.emit_with(HtmlEmitter()) == (
            "<p>\n  This <strong>isn&apos;t</strong> Markdown!\n</p>\n"
        )

    def test_unterminated_bold_is_text(self) -> None:
        assert _parse("a *b", Bold()) == (Paragraph((Text("a *b"),)),)

    def test_bold_does_not_cross_blank_line(self) -> None:
        blocks = _parse("*a\n\nb*", Bold())
        assert blocks == (Paragraph((Text("*a"),)), Paragraph((Text("b*"),)))

    def test_bold_spans_single_newline(self) -> None:
        blocks = _parse("*a \n  b*", Bold())
        assert blocks == (Paragraph((ExtensionElement(BOLD, Text("a b")),)),)

    def test_comment_inside_bold_is_dropped(self) -> None:
        blocks = _parse("*a # hidden*\nb*", Bold())
        assert blocks == (Paragraph((ExtensionElement(BOLD, Text("a b")),)),)

    def test_adjacent_bold_runs(self) -> None:
        blocks = _parse("*a**b*", Bold())
        assert blocks == (
            Paragraph((ExtensionElement(BOLD, Text("a")), ExtensionElement(BOLD, Text("b")))),
        )


class TestItalics:
    """``/italic/`` emphasis."""

    def test_italics_html(self) -> None:
        parser = Parser("\n  This /isn't/ Markdown!\n").add_extension(Italics())
        assert parser.emit_with(HtmlEmitter()) == (
            "<p>\n  This <em>isn&apos;t</em> Markdown!\n</p>\n"
        )

    def test_bold_and_italics_together(self) -> None:
        blocks = _parse("*a* /b/", Bold(), Italics())
        assert blocks == (
            Paragraph(
                (
                    ExtensionElement(BOLD, Text("a")),
                    Text(" "),
                    ExtensionElement(ITALICS, Text("b")),
                )
            ),
        )


class TestLists:
    """Bulleted lists with a caller-chosen bullet."""

    def test_runs_of_bullets_group_into_separate_lists(self) -> None:
        source = "Paragraph\n** one\n\n# other content\n** two\n** three\n"
        blocks = _parse(source, Lists("**"))
        assert blocks == (
            Paragraph((Text("Paragraph"),)),
            ExtensionBlocks(LIST, (_item("one"),)),
            ExtensionBlocks(LIST, (_item("two"), _item("three"))),
        )

    def test_single_character_bullet(self) -> None:
        blocks = _parse("- a\n- b", Lists("-"))
        assert blocks == (ExtensionBlocks(LIST, (_item("a"), _item("b"))),)

    def test_item_with_emphasis(self) -> None:
        blocks = _parse("- *a* b\n- c", Lists("-"), Bold())
        assert blocks == (
            ExtensionBlocks(
                LIST,
                (
                    ExtensionBlock(LIST_ITEM, (ExtensionElement(BOLD, Text("a")), Text(" b"))),
                    _item("c"),
                ),
            ),
        )

    def test_item_continues_on_next_line(self) -> None:
        blocks = _parse("- a\n  continued\n- b", Lists("-"))
        assert blocks == (ExtensionBlocks(LIST, (_item("a continued"), _item("b"))),)

    def test_empty_item(self) -> None:
        blocks = _parse("=> => x", Lists("=>"))
        assert blocks == (ExtensionBlocks(LIST, (ExtensionBlock(LIST_ITEM, ()), _item("x"))),)

    def test_empty_bullet_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            Lists("")

    def test_bullet_ends_paragraph_without_blank_line(self) -> None:
        parser = Parser("text\n- x", registry=create_registry(list_bullet="-"))
        parser.take_many(5)
        assert parser.sees_end_of_block()


class TestDispatch:
    """Registration order, rollback and reentrancy."""

    def test_fully_external_extension(self) -> None:
        parser = Parser("This is $$some syntax$$").add_extension(Dollars())
        emitter = HtmlEmitter().tagged_element(DOLLARS, lambda _: ("span", []))
        assert parser.emit_with(emitter) == "<p>\n  This is <span>some syntax</span>\n</p>\n"

    def test_declined_element_trial_is_rolled_back(self) -> None:
        sees_abc = SeesAbc()
        blocks = _parse("abc", Greedy(), sees_abc)
        assert blocks == (Paragraph((ExtensionElement(SEEN, Text("abc")),)),)
        assert sees_abc.trial_offsets == [0]

    def test_declined_block_trial_is_rolled_back(self) -> None:
        assert _parse("abcdef", Greedy()) == (Paragraph((Text("abcdef"),)),)

    def test_first_match_wins(self) -> None:
        class AlsoDollars(Dollars):
            name = "also-dollars"
            tags = (Tag("ALSO"),)

            def parse_element(self, parser):
                element = super().parse_element(parser)
                if element is None:
                    return None
                return ExtensionElement(Tag("ALSO"), element.child)

        blocks = _parse("$$x$$", AlsoDollars(), Dollars())
        assert blocks == (Paragraph((ExtensionElement(Tag("ALSO"), Text("x")),)),)

    def test_block_extension_reenters_element_loop(self) -> None:
        blocks = _parse("> a *b*\n\nc", Quote(), Bold())
        assert blocks == (
            ExtensionBlock(QUOTE, (Text("a "), ExtensionElement(BOLD, Text("b")))),
            Paragraph((Text("c"),)),
        )

    def test_no_op_defaults(self) -> None:
        class Nothing(Extension):
            pass

        ext = Nothing()
        parser = Parser("x")
        assert ext.parse_block(parser) is None
        assert ext.parse_element(parser) is None
        assert ext.sees_end_of_block(parser) is False
        assert ext.name == "Nothing"
        assert ext.tags == ()
        assert _parse("x", ext) == (Paragraph((Text("x"),)),)

    def test_end_vote_paired_with_block_rule(self) -> None:
        blocks = _parse("a---b", Rule())
        assert blocks == (
            Paragraph((Text("a"),)),
            ExtensionBlock(RULE, ()),
            Paragraph((Text("b"),)),
        )
