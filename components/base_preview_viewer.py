"""
Base viewer module for the Code Visualizer
Provides the themed read-only pane and the editor/viewer split layout
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QSplitter, QTextBrowser
from PyQt6.QtCore import Qt, QTimer


class BasePreviewViewer(QTextBrowser):
    """
    Abstract base class for read-only viewers.
    Provides common theming and content helpers.
    """

    def __init__(self, colors):
        super().__init__()
        self.colors = colors
        self.setOpenLinks(False)
        self.setReadOnly(True)
        self.setup_base_style()
        self.setup_custom_style()

    def apply_theme(self, colors):
        self.colors = colors
        self.setup_base_style()

    def setup_base_style(self):
        """Apply common base styling to all viewers"""
        base_style = f"""
            QTextBrowser {{
                font-family: 'Consolas', 'Menlo', 'Courier New', monospace;
                color: {self.colors["text"]};
                background-color: {self.colors["bg"]};
                border: none;
                padding: 16px;
            }}

            QScrollBar:vertical {{
                background: {self.colors["bg"]};
                width: 14px;
                border: none;
            }}

            QScrollBar::handle:vertical {{
                background: {self.colors["border"]};
                min-height: 30px;
                border: none;
            }}

            QScrollBar::handle:vertical:hover {{
                background: {self.colors["line_number"]};
            }}

            QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical,
            QScrollBar::add-page:vertical, QScrollBar::sub-page:vertical {{
                background: none;
                border: none;
            }}
        """
        self.setStyleSheet(base_style)

    def setup_custom_style(self):
        """Setup viewer-specific document styling - must be implemented by subclasses"""
        raise NotImplementedError("Subclasses must implement setup_custom_style()")

    def update_content(self, state):
        """Update the viewer from a new view state - must be implemented by subclasses"""
        raise NotImplementedError("Subclasses must implement update_content()")

    def preserve_scroll_position(self, update_func):
        """Preserve scroll position during content updates"""
        scrollbar = self.verticalScrollBar()
        scroll_pos = scrollbar.value()

        update_func()

        # Restore after the document has been laid out again
        QTimer.singleShot(10, lambda: scrollbar.setValue(scroll_pos))


class SplitPreviewWidget(QWidget):
    """
    Editor on the left, viewer on the right, in a horizontal splitter.
    """

    def __init__(self, editor_pane, viewer_pane):
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.setChildrenCollapsible(False)
        self.splitter.addWidget(editor_pane)
        self.splitter.addWidget(viewer_pane)

        # 50/50 split
        self.splitter.setSizes([400, 400])
        layout.addWidget(self.splitter)
