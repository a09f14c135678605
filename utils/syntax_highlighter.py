import html
import re
from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Token categories. The value doubles as the CSS class of the marker span."""
    COMMENT = "comment"
    STRING = "string"
    FRAMEWORK = "framework"
    KEYWORD = "keyword"
    NUMBER = "number"
    TAG = "tag"
    ATTRIBUTE = "attribute"
    # Detected but never wrapped in a marker
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"


KEYWORDS = (
    'import', 'export', 'default', 'const', 'let', 'var', 'function', 'return',
    'if', 'else', 'for', 'while', 'do', 'break', 'continue', 'switch', 'case',
    'try', 'catch', 'finally', 'throw', 'class', 'extends', 'super', 'this',
    'new', 'typeof', 'instanceof', 'true', 'false', 'null', 'undefined',
)

FRAMEWORK_NAMES = (
    'React', 'useState', 'useEffect', 'useCallback', 'useMemo', 'useRef',
    'useContext', 'Component', 'Fragment', 'JSX',
)

PATTERNS = {
    Category.COMMENT: re.compile(r'(//.*$|/\*[\s\S]*?\*/)', re.MULTILINE),
    Category.STRING: re.compile(r'(["\'`])((?:\\.|(?!\1)[^\\])*?)\1'),
    Category.FRAMEWORK: re.compile(r'\b(' + '|'.join(FRAMEWORK_NAMES) + r')\b'),
    Category.KEYWORD: re.compile(r'\b(' + '|'.join(KEYWORDS) + r')\b'),
    Category.NUMBER: re.compile(r'\b\d+\.?\d*\b'),
    Category.TAG: re.compile(r'<\/?[A-Za-z][A-Za-z0-9]*(?:\s[^>]*)?\/?>'),
    Category.ATTRIBUTE: re.compile(r'\b[a-zA-Z-]+(?=\s*=)'),
    Category.OPERATOR: re.compile(r'[+\-*/%=<>!&|^~?:]'),
    Category.PUNCTUATION: re.compile(r'[{}[\]();,.]'),
}

# Order in which the regex chain applies its substitutions
CHAIN_ORDER = (
    Category.COMMENT,
    Category.STRING,
    Category.FRAMEWORK,
    Category.KEYWORD,
    Category.NUMBER,
    Category.TAG,
    Category.ATTRIBUTE,
)

STYLED_CATEGORIES = frozenset(CHAIN_ORDER)

# Class names the regex chain emits, matching the older widget's stylesheet
CHAIN_CLASS_NAMES = {
    **{c: c.value for c in CHAIN_ORDER},
    Category.FRAMEWORK: "react",
    Category.TAG: "jsx-tag",
    Category.ATTRIBUTE: "jsx-attribute",
}

# Rules tried at every scanner position; ties on length go to the earlier rule.
# Attribute names are only looked for inside tags.
SCAN_RULES = tuple(c for c in CHAIN_ORDER if c is not Category.ATTRIBUTE)
TAG_CHILD_RULES = (Category.STRING, Category.ATTRIBUTE)

WORD_RE = re.compile(r'[\w$]+')
TAG_WORD_RE = re.compile(r'[\w$-]+')
MARKER_RE = re.compile(r'<span class="[a-z-]+">|</span>')


@dataclass(frozen=True)
class Token:
    category: Category | None
    text: str
    children: tuple['Token', ...] = ()

    @property
    def styled(self) -> bool:
        return self.category in STYLED_CATEGORIES


def _append(tokens: list[Token], category: Category | None, text: str):
    """Appends a token, merging runs of plain text into one token."""
    if category is None and tokens and tokens[-1].category is None:
        tokens[-1] = Token(None, tokens[-1].text + text)
    else:
        tokens.append(Token(category, text))


def _longest_match(text: str, pos: int, rules) -> tuple[Category, re.Match] | None:
    best = None
    for category in rules:
        match = PATTERNS[category].match(text, pos)
        if not match or match.end() <= pos:
            continue
        if best is None or match.end() > best[1].end():
            best = (category, match)
    return best


def _scan_fallback(tokens: list[Token], text: str, pos: int) -> int:
    """Consumes text no rule claimed: a whole word, or a single character."""
    word = WORD_RE.match(text, pos)
    if word:
        _append(tokens, None, word.group())
        return word.end()
    char = text[pos]
    if PATTERNS[Category.OPERATOR].fullmatch(char):
        tokens.append(Token(Category.OPERATOR, char))
    elif PATTERNS[Category.PUNCTUATION].fullmatch(char):
        tokens.append(Token(Category.PUNCTUATION, char))
    else:
        _append(tokens, None, char)
    return pos + 1


def _tag_children(tag_text: str) -> tuple[Token, ...]:
    children: list[Token] = []
    pos = 0
    while pos < len(tag_text):
        found = _longest_match(tag_text, pos, TAG_CHILD_RULES)
        if found:
            category, match = found
            children.append(Token(category, match.group()))
            pos = match.end()
            continue
        word = TAG_WORD_RE.match(tag_text, pos)
        end = word.end() if word else pos + 1
        _append(children, None, tag_text[pos:end])
        pos = end
    return tuple(children)


def tokenize(line: str) -> list[Token]:
    """
    Splits a line into a flat token sequence in a single left-to-right pass.

    Every character of the line belongs to exactly one top-level token. At
    each position the longest match among the styled rules wins, ties going
    to the rule applied first by the regex chain. Text no rule claims is
    consumed a whole word at a time so keywords and numbers are never found
    inside identifiers. Tag tokens carry their attribute names and quoted
    values as children.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        found = _longest_match(line, pos, SCAN_RULES)
        if found is None:
            pos = _scan_fallback(tokens, line, pos)
            continue
        category, match = found
        if category is Category.TAG:
            tokens.append(Token(category, match.group(), _tag_children(match.group())))
        else:
            tokens.append(Token(category, match.group()))
        pos = match.end()
    return tokens


def _wrap(class_name: str, inner: str) -> str:
    return f'<span class="{class_name}">{inner}</span>'


def render_tokens(tokens) -> str:
    parts = []
    for token in tokens:
        if token.children:
            inner = render_tokens(token.children)
        else:
            inner = html.escape(token.text, quote=False)
        parts.append(_wrap(token.category.value, inner) if token.styled else inner)
    return ''.join(parts)


def highlight_line(line: str) -> str:
    """Returns the line as escaped HTML with category marker spans."""
    return render_tokens(tokenize(line))


def chain_highlight_line(line: str, steps=CHAIN_ORDER) -> str:
    """
    Highlights a line by chaining global regex substitutions.

    Each step rewrites the output of the previous one, so later patterns also
    see the markers inserted earlier and can wrap parts of them. The input is
    not escaped. Kept for comparison with the older regex-chain output; use
    highlight_line for display.
    """
    highlighted = line
    for category in steps:
        highlighted = PATTERNS[category].sub(
            lambda m, c=CHAIN_CLASS_NAMES[category]: _wrap(c, m.group(0)), highlighted)
    return highlighted


def strip_markers(highlighted: str) -> str:
    """Inverse of highlight_line: drops the marker spans and unescapes the text."""
    return html.unescape(MARKER_RE.sub('', highlighted))
