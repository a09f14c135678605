import sys
from pathlib import Path
import unittest

# Make the project root importable when tests are run from anywhere
_project_root = Path(__file__).resolve().parent.parent
_project_root_str = str(_project_root)
if _project_root_str not in sys.path:
    sys.path.insert(0, _project_root_str)

from utils.syntax_highlighter import (
    Category, tokenize, highlight_line, chain_highlight_line, strip_markers,
)


class TestHighlightLine(unittest.TestCase):
    def test_line_comment_is_single_comment_span(self):
        self.assertEqual(highlight_line("// hi"), '<span class="comment">// hi</span>')

    def test_keyword_and_number_leave_punctuation_plain(self):
        self.assertEqual(
            highlight_line("let x = 5;"),
            '<span class="keyword">let</span> x = <span class="number">5</span>;',
        )

    def test_attribute_nested_inside_tag(self):
        out = highlight_line('<div className="a">')
        self.assertTrue(out.startswith('<span class="tag">&lt;div '))
        self.assertTrue(out.endswith('&gt;</span>'))
        self.assertIn('<span class="attribute">className</span>', out)
        self.assertIn('<span class="string">"a"</span>', out)

    def test_framework_identifier(self):
        self.assertEqual(
            highlight_line("useState(0)"),
            '<span class="framework">useState</span>(<span class="number">0</span>)',
        )

    def test_keyword_inside_string_is_not_rewrapped(self):
        self.assertEqual(
            highlight_line("'return'"),
            '<span class="string">\'return\'</span>',
        )

    def test_keywords_not_found_inside_identifiers(self):
        self.assertEqual(highlight_line("classy returned x5"), "classy returned x5")

    def test_escaped_quote_stays_inside_string(self):
        self.assertEqual(
            highlight_line(r'"a\"b" c'),
            r'<span class="string">"a\"b"</span> c',
        )

    def test_unmatched_quote_falls_through(self):
        self.assertEqual(highlight_line("'abc"), "'abc")

    def test_block_comment_on_one_line(self):
        self.assertEqual(
            highlight_line("/* a */ b"),
            '<span class="comment">/* a */</span> b',
        )

    def test_attribute_outside_tag_is_plain(self):
        self.assertNotIn('attribute', highlight_line("x = 1"))

    def test_angle_brackets_outside_tags_are_escaped(self):
        self.assertEqual(highlight_line("a < b && c > d"), "a &lt; b &amp;&amp; c &gt; d")

    def test_empty_line(self):
        self.assertEqual(highlight_line(""), "")
        self.assertEqual(tokenize(""), [])


class TestRoundTrip(unittest.TestCase):
    SAMPLES = [
        "",
        "// hi",
        "let x = 5;",
        '<div className="a">',
        "const [count, setCount] = useState(0);",
        "document.title = `Count: ${count}`;",
        "<button onClick={() => setIsVisible(!isVisible)}>",
        "'unterminated \"mixed` quotes",
        '<span class="keyword">not a marker</span>',
        "&amp; &lt; &#65; & < >",
        "3.14 + 2. - .5",
        "\tindented\r",
    ]

    def test_strip_markers_restores_input(self):
        for sample in self.SAMPLES:
            with self.subTest(sample=sample):
                self.assertEqual(strip_markers(highlight_line(sample)), sample)

    def test_tokens_cover_the_whole_line(self):
        for sample in self.SAMPLES:
            with self.subTest(sample=sample):
                self.assertEqual(''.join(t.text for t in tokenize(sample)), sample)


class TestTokenize(unittest.TestCase):
    def test_punctuation_and_operators_detected(self):
        categories = [t.category for t in tokenize("a=b;")]
        self.assertIn(Category.OPERATOR, categories)
        self.assertIn(Category.PUNCTUATION, categories)

    def test_tag_children_partition_tag_text(self):
        (tag,) = tokenize('<a href="x">')
        self.assertIs(tag.category, Category.TAG)
        self.assertEqual(''.join(c.text for c in tag.children), tag.text)


class TestChainHighlight(unittest.TestCase):
    def test_no_matches_returns_input(self):
        self.assertEqual(chain_highlight_line("   "), "   ")

    def test_steps_apply_in_order(self):
        self.assertEqual(
            chain_highlight_line("let x = 5;", steps=(Category.KEYWORD, Category.NUMBER)),
            '<span class="keyword">let</span> x = <span class="number">5</span>;',
        )

    def test_later_steps_rewrap_earlier_markers(self):
        # The keyword step also sees the `class` of the string marker
        self.assertEqual(
            chain_highlight_line("'return'", steps=(Category.STRING, Category.KEYWORD)),
            '<span <span class="keyword">class</span>="string">\''
            '<span class="keyword">return</span>\'</span>',
        )

    def test_comment_applied_first(self):
        out = chain_highlight_line("// hi", steps=(Category.COMMENT,))
        self.assertEqual(out, '<span class="comment">// hi</span>')

    def test_framework_names_use_react_class(self):
        self.assertEqual(
            chain_highlight_line("useState", steps=(Category.FRAMEWORK,)),
            '<span class="react">useState</span>',
        )

    def test_tag_and_attribute_use_jsx_classes(self):
        # The attribute step wraps the `class` of the tag marker
        self.assertEqual(
            chain_highlight_line("<b>"),
            '<span <span class="jsx-attribute">class</span>="jsx-tag"><b></span>',
        )


if __name__ == '__main__':
    unittest.main()
