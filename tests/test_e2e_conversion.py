"""
End-to-end conversion tests

Tests the full pipeline: Markdown tree → Resolver → Renderer → Assembler → HTML,
plus the CLI pipeline stages.
"""

import pytest
from pathlib import Path
from argparse import Namespace

from mdhtml.lib.assembler import assemble, htmlDocument_build
from mdhtml.lib.converter import Converter, Variant, markdown_toHTML
from mdhtml.lib.errors import LineTooLongError, RenderError, SourceIOError
from mdhtml.models import ProgramState, pipeline


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestAssembler:
    """Test the HTML skeleton"""

    def test_exact_document(self):
        """The skeleton is emitted in a fixed layout"""
        html = htmlDocument_build("<p>x</p>\n", "Guide", ["a.css", "b.css"])
        assert html == (
            "<!doctype html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '\t<meta charset="utf-8">\n'
            '\t<meta http-equiv="x-ua-compatible" content="ie=edge">\n'
            '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            "\t<title>Guide</title>\n"
            '\t<link rel="stylesheet" type="text/css" href="a.css">\n'
            '\t<link rel="stylesheet" type="text/css" href="b.css">\n'
            "</head>\n"
            "<body>\n"
            "<p>x</p>\n"
            "</body>\n"
            "</html>\n"
        )

    def test_title_escaped(self):
        """Titles are HTML-escaped"""
        assert "<title>A &amp; B</title>" in htmlDocument_build("", "A & B", [])

    def test_no_title(self):
        """A missing title gives an empty element"""
        assert "<title></title>" in htmlDocument_build("", None, [])

    def test_bytes(self):
        """assemble() returns UTF-8 bytes"""
        data = assemble("<p>é</p>\n", "T", [])
        assert isinstance(data, bytes)
        assert "é".encode("utf-8") in data


class TestMarkdownVariant:
    """Test the simple variant with the Markdown engine"""

    def test_full_document(self, tmp_path):
        """Includes, stylesheets and title all reach the output"""
        write(tmp_path / "chapters" / "c1.md", "## One\n\nFirst chapter.\n")
        write(tmp_path / "chapters" / "c2.md", ":css:../theme.css\n## Two\n")
        root = write(
            tmp_path / "guide.md",
            ":title:A & B\n:css:theme.css\n# Guide\n\n:include*:chapters|^c\n",
        )
        html = Converter(variant=Variant.MARKDOWN).markdown_toHTML(root).decode("utf-8")

        assert "<title>A &amp; B</title>" in html
        assert html.count("theme.css") == 1
        assert '<h1 id="guide">Guide</h1>' in html
        assert html.index("One") < html.index("First chapter.") < html.index("Two")
        assert ":include" not in html
        assert html.endswith("</body>\n</html>\n")

    def test_module_function(self, tmp_path):
        """markdown_toHTML() converts with defaults"""
        root = write(tmp_path / "x.md", ":title:X\nhello\n")
        html = markdown_toHTML(root)
        assert b"<p>hello</p>" in html
        assert b"<title>X</title>" in html

    def test_attribute_directives_are_text(self, tmp_path):
        """The simple variant does not know :id:"""
        root = write(tmp_path / "x.md", ":id:intro\n")
        assert b":id:intro" in Converter(variant="markdown").markdown_toHTML(root)

    def test_injected_renderer(self, tmp_path):
        """Any callable can render the body"""
        root = write(tmp_path / "x.md", "a\n:include:y.md\n")
        write(tmp_path / "y.md", "b\n")
        converter = Converter(variant=Variant.MARKDOWN, renderer=lambda text: text.upper())
        assert b"<body>\nA\nB\n</body>" in converter.markdown_toHTML(root)

    def test_renderer_error_propagates(self, tmp_path):
        """Renderer errors abort the conversion"""
        def broken(text):
            raise RenderError("boom")

        root = write(tmp_path / "x.md", "a\n")
        with pytest.raises(RenderError):
            Converter(renderer=broken).markdown_toHTML(root)


class TestHeadingsVariant:
    """Test the attribute-aware variant"""

    def test_heading_attributes(self):
        """Attribute directives decorate the following heading"""
        html = Converter(variant=Variant.HEADINGS).text_toHTML(":id:intro\n:class:big\n# Hello\n")
        assert b'<h1 id="intro" class="big">Hello</h1>\n' in html

    def test_blank_line_reset(self):
        """A blank line between directives and heading drops the attributes"""
        html = Converter(variant=Variant.HEADINGS).text_toHTML(":id:intro\n:class:big\n\n# Hello\n")
        assert b"<h1>Hello</h1>" in html
        assert b"intro" not in html

    def test_lines_passthrough(self):
        """Non-heading lines are printed as-is"""
        html = Converter(variant=Variant.HEADINGS).text_toHTML("# T\nplain *text*\n")
        assert b"<body>\n<h1>T</h1>\nplain *text*\n</body>" in html

    def test_with_markdown_renderer(self):
        """Generated heading tags survive the Markdown engine"""
        from mdhtml.lib.renderer import MarkdownRenderer

        converter = Converter(variant=Variant.HEADINGS, renderer=MarkdownRenderer())
        html = converter.text_toHTML(":style:color: red\n# Hot\n\nSome *text*\n")
        assert b'<h1 style="color: red">Hot</h1>' in html
        assert b"<em>text</em>" in html


class TestLineLimit:
    """Test where the source line size limit applies"""

    def test_long_line_markdown(self, tmp_path):
        """The markdown variant reads arbitrarily long lines"""
        root = write(tmp_path / "x.md", "x" * 70000 + "\n")
        converter = Converter(variant=Variant.MARKDOWN, renderer=lambda text: text)
        assert ("x" * 70000).encode("utf-8") in converter.markdown_toHTML(root)

    def test_long_line_headings(self, tmp_path):
        """The headings variant rejects lines above max_line_size"""
        root = write(tmp_path / "x.md", "ok\n" + "x" * 70000 + "\n")
        with pytest.raises(LineTooLongError) as excinfo:
            Converter(variant=Variant.HEADINGS).markdown_toHTML(root)
        assert excinfo.value.line_number == 2


class TestFileConvert:
    """Test writing output files"""

    def test_default_destination(self, tmp_path):
        """Output lands next to the source with an .html extension"""
        root = write(tmp_path / "guide.md", ":title:G\n:css:s.css\ntext\n")
        result = Converter().file_convert(root)

        output = tmp_path / "guide.html"
        assert result['status'] is True
        assert result['output_file'] == str(output)
        assert result['title'] == "G"
        assert result['css_count'] == 1
        assert output.read_bytes().startswith(b'<!doctype html>\n<html lang="en">\n')

    def test_explicit_destination(self, tmp_path):
        """Output directories are created as needed"""
        root = write(tmp_path / "in" / "guide.md", "text\n")
        result = Converter().file_convert(root, tmp_path / "out" / "deep" / "guide.html")
        assert Path(result['output_file']).exists()

    def test_missing_source(self, tmp_path):
        """Missing sources raise and write nothing"""
        with pytest.raises(SourceIOError):
            Converter().file_convert(tmp_path / "missing.md")
        assert not (tmp_path / "missing.html").exists()


class TestCommandLine:
    """Test the CLI pipeline stages"""

    def state_make(self, tmp_path, files, **kwargs):
        options = Namespace(inputFile=files, variant=None, maxLineSize=None, verbosity=1, **kwargs)
        return ProgramState.state_createFromNamespace(
            options=options, inputdir=tmp_path / "in", outputdir=tmp_path / "out"
        )

    def test_convert_files(self, tmp_path):
        """Each .md argument is converted into outputdir"""
        from mdhtml.__main__ import env_check, files_convert, results_report

        write(tmp_path / "in" / "a.md", "# A\n")
        write(tmp_path / "in" / "sub" / "b.md", "# B\n")
        state = pipeline(
            self.state_make(tmp_path, ["a.md", "sub/b.md"]),
            env_check,
            files_convert,
            results_report,
        )
        assert len(state.convertResults) == 2
        assert (tmp_path / "out" / "a.html").exists()
        assert (tmp_path / "out" / "sub" / "b.html").exists()

    def test_skip_non_markdown(self, tmp_path):
        """Arguments without .md are skipped, not fatal"""
        from mdhtml.__main__ import env_check

        write(tmp_path / "in" / "a.md", "# A\n")
        state = env_check(self.state_make(tmp_path, ["notes.txt", "a.md"]))
        assert [source.name for source, _ in state.sourceFiles] == ["a.md"]
        assert state.envOK is True

    def test_error_is_fatal(self, tmp_path):
        """The first failing file stops the run with exit status 1"""
        from mdhtml.__main__ import env_check, files_convert

        write(tmp_path / "in" / "bad.md", ":include:missing.md\n")
        write(tmp_path / "in" / "good.md", "ok\n")
        with pytest.raises(SystemExit) as excinfo:
            pipeline(self.state_make(tmp_path, ["bad.md", "good.md"]), env_check, files_convert)
        assert excinfo.value.code == 1
        assert not (tmp_path / "out" / "good.html").exists()

    def test_max_line_size_option(self, tmp_path):
        """--maxLineSize limits source lines"""
        from mdhtml.__main__ import env_check, files_convert

        write(tmp_path / "in" / "a.md", "x" * 20 + "\n")
        state = self.state_make(tmp_path, ["a.md"])
        state.variant = "headings"
        state.maxLineSize = 10
        with pytest.raises(SystemExit):
            files_convert(env_check(state))

    def test_max_line_size_ignored_for_markdown(self, tmp_path):
        """--maxLineSize does not apply to the markdown variant"""
        from mdhtml.__main__ import env_check, files_convert

        write(tmp_path / "in" / "a.md", "x" * 20 + "\n")
        state = self.state_make(tmp_path, ["a.md"])
        state.maxLineSize = 10
        files_convert(env_check(state))
        assert (tmp_path / "out" / "a.html").exists()

    def test_headings_variant_option(self, tmp_path):
        """--variant headings enables attribute directives"""
        from mdhtml.__main__ import env_check, files_convert

        write(tmp_path / "in" / "a.md", ":id:top\n# A\n")
        state = self.state_make(tmp_path, ["a.md"])
        state.variant = "headings"
        files_convert(env_check(state))
        assert '<h1 id="top">A</h1>' in (tmp_path / "out" / "a.html").read_text()
