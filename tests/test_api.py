"""Tests for the high-level Publication API."""


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_paragraph(self) -> None:
        """Test parsing a paragraph."""
        from publication import Paragraph, Text, parse

        assert parse("Hello World") == (Paragraph((Text("Hello World"),)),)

    def test_parse_with_source_file(self) -> None:
        """Source file names appear in parse errors."""
        import pytest

        from publication import Parser, UnexpectedEndOfInput

        with pytest.raises(UnexpectedEndOfInput, match="test.publ:1:1"):
            Parser("", source_file="test.publ").parse_paragraph()

    def test_parse_returns_tuple(self) -> None:
        from publication import parse

        assert parse("") == ()
        assert isinstance(parse("a\n\nb"), tuple)


class TestRenderFunction:
    """Tests for the render() function."""

    def test_render_html(self) -> None:
        from publication import parse, render

        assert render(parse("Hello, World! # greeting")) == "<p>\n  Hello, World!\n</p>\n"

    def test_render_txt(self) -> None:
        from publication import parse, render

        assert render(parse("Hello,\nWorld!"), format="txt") == "Hello, World!\n"


class TestPublicationClass:
    """Tests for the Publication processor."""

    def test_call(self) -> None:
        from publication import Publication

        publ = Publication(enable_bold=True)
        assert publ("This *isn't* Markdown!") == (
            "<p>\n  This <strong>isn&apos;t</strong> Markdown!\n</p>\n"
        )

    def test_reusable(self) -> None:
        from publication import Publication

        publ = Publication(enable_italics=True)
        assert publ("/a/") == publ("/a/")

    def test_parse_and_render(self) -> None:
        from publication import Publication

        publ = Publication(list_bullet="-", format="txt")
        blocks = publ.parse("- a\n- b")
        assert publ.render(blocks) == "- a\n- b\n"

    def test_custom_emitter_tag_table(self) -> None:
        from publication import Extension, ExtensionElement, Publication, Tag, Text

        shout = Tag("SHOUT")

        class Shout(Extension):
            tags = (shout,)

            def parse_element(self, parser):
                if parser.peek() != "!":
                    return None
                parser.take()
                word = []
                while parser.peek().isalpha():
                    word.append(parser.take())
                return ExtensionElement(shout, Text("".join(word).upper()))

        publ = Publication(extensions=[Shout()])
        publ.emitter.tagged_element(shout, lambda _: ("b", [("class", "shout")]))
        assert publ("say !hi") == '<p>\n  say <b class="shout">HI</b>\n</p>\n'

    def test_from_config(self) -> None:
        from publication import ParseConfig, Publication

        publ = Publication.from_config(ParseConfig(enable_bold=True), format="txt")
        assert publ.config.enable_bold is True
        assert publ.emitter.format == "txt"
        assert publ("*x*") == "x\n"

    def test_explicit_emitter(self) -> None:
        from publication import HtmlEmitter, Publication

        emitter = HtmlEmitter()
        assert Publication(emitter=emitter).emitter is emitter


class TestEmitterLookup:
    """Format names and destination suffixes."""

    def test_get_emitter(self) -> None:
        from publication import HtmlEmitter, TextEmitter, get_emitter

        assert isinstance(get_emitter("html"), HtmlEmitter)
        assert isinstance(get_emitter("txt"), TextEmitter)

    def test_emitter_for_path(self) -> None:
        from publication import emitter_for_path

        assert emitter_for_path("out/notes.txt").format == "txt"
        assert emitter_for_path("notes.html").format == "html"

    def test_emitter_for_path_unknown(self) -> None:
        import pytest

        from publication import emitter_for_path

        with pytest.raises(KeyError):
            emitter_for_path("notes.pdf")
        with pytest.raises(KeyError):
            emitter_for_path("notes")
