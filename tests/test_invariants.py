"""Property-based tests for parser and emitter invariants using Hypothesis.

These tests verify properties that should hold for any input:
1. Parsing never crashes, whatever extensions are enabled
2. Text nodes hold normalized whitespace and no comment text
3. Streaming emission matches parse-then-emit
4. Trailing comments never change the AST
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from publication import (
    ExtensionBlock,
    ExtensionBlocks,
    ExtensionElement,
    HtmlEmitter,
    Paragraph,
    ParseConfig,
    Parser,
    Text,
    TextEmitter,
    parse,
)
from publication.emitters.html import html_escape

# Small alphabet that hits every builtin and extension rule
documents = st.text(alphabet="ab #*/-\n\t", max_size=80)
comment_free_documents = st.text(alphabet="ab */-\n\t", max_size=80)

configs = st.builds(
    ParseConfig,
    enable_bold=st.booleans(),
    enable_italics=st.booleans(),
    list_bullet=st.sampled_from([None, "-", "--"]),
)


def _texts(blocks):
    """Yield every Text node in a document, depth first."""
    for block in blocks:
        match block:
            case Paragraph(children=children) | ExtensionBlock(children=children):
                yield from _element_texts(children)
            case ExtensionBlocks(blocks=inner):
                yield from _texts(inner)


def _element_texts(elements):
    for element in elements:
        while isinstance(element, ExtensionElement):
            element = element.child
        yield element


class TestParserProperties:
    """Invariants of the parser."""

    @given(source=documents, config=configs)
    @settings(max_examples=200)
    def test_parse_never_raises(self, source: str, config: ParseConfig) -> None:
        blocks = parse(source, config=config)
        assert isinstance(blocks, tuple)

    @given(source=documents, config=configs)
    @settings(max_examples=200)
    def test_text_is_normalized(self, source: str, config: ParseConfig) -> None:
        for text in _texts(parse(source, config=config)):
            assert isinstance(text, Text)
            assert "#" not in text.content
            assert "\n" not in text.content
            assert "\t" not in text.content
            assert "  " not in text.content

    @given(source=documents, config=configs)
    @settings(max_examples=100)
    def test_paragraphs_never_start_or_end_with_space(
        self, source: str, config: ParseConfig
    ) -> None:
        for block in parse(source, config=config):
            if not isinstance(block, Paragraph):
                continue
            assert block.children
            first, last = block.children[0], block.children[-1]
            if isinstance(first, Text):
                assert not first.content.startswith(" ")
            if isinstance(last, Text):
                assert not last.content.endswith(" ")

    @given(source=documents, config=configs)
    @settings(max_examples=100)
    def test_deterministic(self, source: str, config: ParseConfig) -> None:
        assert parse(source, config=config) == parse(source, config=config)

    @given(source=comment_free_documents, config=configs)
    @settings(max_examples=200)
    def test_trailing_comments_do_not_change_ast(self, source: str, config: ParseConfig) -> None:
        commented = "\n".join(line + " # note" if line else line for line in source.split("\n"))
        assert parse(commented, config=config) == parse(source, config=config)

    @given(source=documents)
    @settings(max_examples=100)
    def test_crlf_equivalent_to_lf(self, source: str) -> None:
        assert parse(source.replace("\n", "\r\n")) == parse(source)


class TestEmitterProperties:
    """Invariants of the emitters."""

    @given(source=documents, config=configs)
    @settings(max_examples=100)
    def test_streaming_matches_batch(self, source: str, config: ParseConfig) -> None:
        blocks = parse(source, config=config)
        for emitter in (HtmlEmitter(), TextEmitter()):
            streamed = Parser(source, registry=config.build_registry()).emit_with(emitter)
            assert streamed == emitter.emit(blocks)

    @given(text=st.text(max_size=50))
    def test_escaped_text_has_no_markup_characters(self, text: str) -> None:
        escaped = html_escape(text)
        for char in "<>\"'":
            assert char not in escaped

    @given(source=documents)
    @settings(max_examples=100)
    def test_html_paragraph_count(self, source: str) -> None:
        blocks = parse(source)
        assert HtmlEmitter().emit(blocks).count("<p>") == len(blocks)
