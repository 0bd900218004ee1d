"""Unit tests for the HTML text extractor."""

from __future__ import annotations

from liquidsoap_mcp.extractor import extract_text


class TestBlockRemoval:
    def test_script_block_removed(self) -> None:
        assert extract_text("<p>x</p><script>var a = 1;</script><p>y</p>") == "x\n\ny"

    def test_script_with_angle_brackets_inside(self) -> None:
        html = "<p>x</p><script>if (a < b && c > d) { go(); }</script><p>y</p>"
        assert extract_text(html) == "x\n\ny"

    def test_script_case_insensitive(self) -> None:
        assert extract_text("<SCRIPT type='text/javascript'>alert(1)</SCRIPT>after") == "after"

    def test_style_block_removed(self) -> None:
        assert extract_text("<style>p { color: red; }</style>text") == "text"

    def test_style_case_insensitive(self) -> None:
        assert extract_text("<Style media='all'>p{}</STYLE>text") == "text"

    def test_non_greedy_keeps_text_between_blocks(self) -> None:
        html = "<script>a()</script>keep<script>b()</script>"
        assert extract_text(html) == "keep"


class TestLineBreaks:
    def test_paragraphs_separated_by_blank_line(self) -> None:
        assert extract_text("<p>A</p><p>B</p>") == "A\n\nB"

    def test_br_variants(self) -> None:
        assert extract_text("a<br>b<br/>c<BR />d") == "a\nb\nc\nd"

    def test_list_items(self) -> None:
        assert extract_text("<ul><li>one</li><li>two</li></ul>") == "one\ntwo"

    def test_divs(self) -> None:
        assert extract_text("<div>a</div><div>b</div>") == "a\nb"


class TestTagStripping:
    def test_all_tags_removed(self) -> None:
        assert extract_text('<h3 id="x"><code>source.on_track</code></h3>') == "source.on_track"

    def test_attributes_with_no_text(self) -> None:
        assert extract_text('<img src="a.png" alt="b">') == ""


class TestEntities:
    def test_basic_entities(self) -> None:
        html = "&lt;tag&gt; &quot;q&quot; &apos;s&apos;"
        assert extract_text(html) == "<tag> \"q\" 's'"

    def test_nbsp_becomes_space(self) -> None:
        assert extract_text("a&nbsp;b") == "a b"

    def test_amp_decoded_last(self) -> None:
        assert extract_text("&amp;nbsp;") == "&nbsp;"

    def test_escaped_entity_not_double_decoded(self) -> None:
        assert extract_text("&amp;lt;") == "&lt;"

    def test_decoded_brackets_survive_tag_stripping(self) -> None:
        # Tags are stripped before decoding, so escaped markup stays visible
        assert extract_text("<p>&lt;b&gt;bold&lt;/b&gt;</p>") == "<b>bold</b>"

    def test_numeric_references_untouched(self) -> None:
        assert extract_text("it&#39;s &#x27;") == "it&#39;s &#x27;"


class TestWhitespace:
    def test_blank_line_runs_collapsed(self) -> None:
        assert extract_text("a\n\n\n\nb") == "a\n\nb"

    def test_blank_lines_with_whitespace_collapsed(self) -> None:
        assert extract_text("a\n \n\t\nb") == "a\n\nb"

    def test_single_blank_line_kept(self) -> None:
        assert extract_text("a\n\nb") == "a\n\nb"

    def test_trimmed(self) -> None:
        assert extract_text("  <p> hi </p>  ") == "hi"

    def test_empty_input(self) -> None:
        assert extract_text("") == ""
