import re
from dataclasses import dataclass

# Rough heuristic, not a parser: counts the `function` and `class` keywords
# and `const name = ... =>` arrow assignments. `.` does not cross lines.
FUNCTION_RE = re.compile(r'function|const.*=.*=>|class')

# ECMAScript whitespace and line terminators. str.split() differs: it also
# breaks on \x1c-\x1f and \x85, and not on the BOM.
WHITESPACE_RE = re.compile(
    r'[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+')


@dataclass(frozen=True)
class CodeStats:
    lines: int
    characters: int
    words: int
    functions: int


def count_lines(text: str) -> int:
    return len(text.split('\n'))


def count_words(text: str) -> int:
    return sum(1 for word in WHITESPACE_RE.split(text) if word)


def count_functions(text: str) -> int:
    return len(FUNCTION_RE.findall(text))


def compute_stats(text: str) -> CodeStats:
    """Counts shown in the statistics panel. Total for any input, including ''."""
    return CodeStats(
        lines=count_lines(text),
        characters=len(text),
        words=count_words(text),
        functions=count_functions(text),
    )
