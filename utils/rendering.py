from utils.syntax_highlighter import highlight_line, chain_highlight_line
from utils.themes import get_theme

# One <div> per line. Chain output is raw HTML and can open extra blocks inside
# a line, so each line starts with a named anchor the viewer maps clicks back to.
LINE_ANCHOR_PREFIX = "cv-line-"
LINE_TEMPLATE = (
    '<div style="white-space: pre;{background}">'
    '<a name="' + LINE_ANCHOR_PREFIX + '{index}">&#8203;</a>{gutter}{code}</div>'
)
GUTTER_TEMPLATE = '<span style="color: {color};">{number:>4}   </span>'
EMPTY_LINE = '&nbsp;'

HIGHLIGHTERS = {
    "tokens": highlight_line,
    "chain": chain_highlight_line,
}


def render_line(state, index: int, line: str, colors: dict) -> str:
    highlighted = HIGHLIGHTERS[state.highlight_mode](line) or EMPTY_LINE
    gutter = ''
    if state.show_line_numbers:
        gutter = GUTTER_TEMPLATE.format(color=colors["line_number"], number=index + 1)
    background = ''
    if state.pinned_line == index:
        background = f' background-color: {colors["highlight"]};'
    return LINE_TEMPLATE.format(
        background=background, index=index, gutter=gutter, code=highlighted)


def render_document(state) -> str:
    """HTML body for the highlighted pane: every line highlighted independently."""
    colors = get_theme(state.theme)
    lines = [render_line(state, index, line, colors) for index, line in enumerate(state.lines)]
    return (
        f'<body style="color: {colors["text"]}; background-color: {colors["bg"]};'
        f' font-size: {state.font_size}px;">'
        + ''.join(lines)
        + '</body>'
    )
