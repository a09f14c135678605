"""
Colour schemes for the visualizer.

Each theme supplies the five colours the code panes use (`bg`, `text`,
`border`, `line_number`, `highlight`) plus the chrome colours the Qt
stylesheet needs. Token colours are shared by every theme.
"""

from utils.syntax_highlighter import Category, CHAIN_CLASS_NAMES

THEMES = {
    "dark": {
        "bg": "#111827",
        "text": "#f3f4f6",
        "border": "#374151",
        "line_number": "#6b7280",
        "highlight": "#1f2937",
        "control": "#374151",
        "control_border": "#4b5563",
        "muted": "#9ca3af",
    },
    "light": {
        "bg": "#ffffff",
        "text": "#111827",
        "border": "#d1d5db",
        "line_number": "#9ca3af",
        "highlight": "#f3f4f6",
        "control": "#374151",
        "control_border": "#4b5563",
        "muted": "#9ca3af",
    },
    "monokai": {
        "bg": "#1f2937",
        "text": "#4ade80",
        "border": "#22c55e",
        "line_number": "#86efac",
        "highlight": "#374151",
        "control": "#374151",
        "control_border": "#4b5563",
        "muted": "#9ca3af",
    },
}

DEFAULT_THEME = "dark"

# Accent colours used regardless of theme
ACCENTS = {
    "blue": "#2563eb",
    "blue_hover": "#1d4ed8",
    "green": "#16a34a",
    "green_hover": "#15803d",
    "title_icon": "#60a5fa",
}

STAT_COLORS = {
    "lines": "#60a5fa",
    "characters": "#4ade80",
    "words": "#c084fc",
    "functions": "#fb923c",
}

# (color, bold, italic)
TOKEN_STYLES = {
    Category.KEYWORD: ("#ff79c6", True, False),
    Category.STRING: ("#f1fa8c", False, False),
    Category.COMMENT: ("#6272a4", False, True),
    Category.NUMBER: ("#bd93f9", False, False),
    Category.FRAMEWORK: ("#50fa7b", True, False),
    Category.TAG: ("#8be9fd", False, False),
    Category.ATTRIBUTE: ("#ffb86c", False, False),
}


def get_theme(name: str) -> dict:
    if name not in THEMES:
        raise ValueError(f"Unknown theme: {name!r}")
    return THEMES[name]


def token_stylesheet() -> str:
    """CSS rules for the marker spans, under both tokenizer and chain class names."""
    rules = []
    for category, (color, bold, italic) in TOKEN_STYLES.items():
        declarations = [f"color: {color};"]
        if bold:
            declarations.append("font-weight: bold;")
        if italic:
            declarations.append("font-style: italic;")
        body = ' '.join(declarations)
        for class_name in dict.fromkeys((category.value, CHAIN_CLASS_NAMES[category])):
            rules.append(f".{class_name} {{ {body} }}")
    return "\n".join(rules)


def window_stylesheet(colors: dict) -> str:
    """Qt stylesheet for the main window chrome in the given theme."""
    return f"""
        QMainWindow, QWidget#central {{
            background-color: {colors["bg"]};
            color: {colors["text"]};
        }}
        QLabel {{
            color: {colors["text"]};
        }}
        QLabel#title {{
            font-size: 24px;
            font-weight: bold;
        }}
        QLabel#paneTitle, QLabel#statsTitle {{
            font-size: 16px;
            font-weight: 600;
        }}

        /* Framed sections */
        QFrame#section {{
            background-color: {colors["bg"]};
            border: 1px solid {colors["border"]};
            border-radius: 8px;
        }}

        /* Editor */
        QPlainTextEdit {{
            background-color: {colors["bg"]};
            color: {colors["text"]};
            border: none;
            padding: 16px;
            selection-background-color: {colors["highlight"]};
            selection-color: {colors["text"]};
            font-family: 'Consolas', 'Menlo', 'Courier New', monospace;
        }}

        /* Buttons */
        QPushButton {{
            border: none;
            border-radius: 8px;
            color: white;
            padding: 8px 16px;
        }}
        QPushButton#copyButton {{
            background-color: {ACCENTS["blue"]};
        }}
        QPushButton#copyButton:hover {{
            background-color: {ACCENTS["blue_hover"]};
        }}
        QPushButton#downloadButton {{
            background-color: {ACCENTS["green"]};
        }}
        QPushButton#downloadButton:hover {{
            background-color: {ACCENTS["green_hover"]};
        }}

        /* Controls */
        QComboBox {{
            background-color: {colors["control"]};
            border: 1px solid {colors["control_border"]};
            border-radius: 4px;
            color: #f3f4f6;
            padding: 2px 12px;
        }}
        QCheckBox {{
            color: {colors["text"]};
            spacing: 8px;
        }}

        /* Menus */
        QMenuBar {{
            background-color: {colors["bg"]};
            color: {colors["text"]};
            border-bottom: 1px solid {colors["border"]};
        }}
        QMenuBar::item:selected, QMenu::item:selected {{
            background-color: {colors["highlight"]};
        }}
        QMenu {{
            background-color: {colors["bg"]};
            color: {colors["text"]};
            border: 1px solid {colors["border"]};
        }}

        /* Status Bar */
        QStatusBar {{
            background-color: {colors["bg"]};
            color: {colors["muted"]};
            border-top: 1px solid {colors["border"]};
        }}

        QSplitter::handle {{
            background-color: {colors["border"]};
            width: 1px;
        }}
    """
