"""
Highlighted code pane: renders every line through the syntax highlighter
and reports clicks as line indices so the window can pin a line.
"""

from PyQt6.QtCore import pyqtSignal, Qt, QPointF

from components.base_preview_viewer import BasePreviewViewer
from utils.rendering import render_document, LINE_ANCHOR_PREFIX
from utils.themes import token_stylesheet


def line_of_block(block) -> int:
    """Line index of a text block, taken from the anchor that opens each line."""
    while block.isValid():
        fragments = block.begin()
        if not fragments.atEnd():
            for name in fragments.fragment().charFormat().anchorNames():
                if name.startswith(LINE_ANCHOR_PREFIX):
                    return int(name[len(LINE_ANCHOR_PREFIX):])
        # Blocks opened by markup inside a line belong to the line above
        block = block.previous()
    return 0


def line_at(document, point: QPointF):
    """Line under a point in document coordinates, or None outside every line."""
    layout = document.documentLayout()
    position = layout.hitTest(point, Qt.HitTestAccuracy.FuzzyHit)
    if position < 0:
        return None
    block = document.findBlock(position)
    rect = layout.blockBoundingRect(block)
    if not rect.top() <= point.y() < rect.bottom():
        return None
    return line_of_block(block)


class HighlightedView(BasePreviewViewer):
    lineClicked = pyqtSignal(int)  # zero-based line index

    def __init__(self, colors):
        super().__init__(colors)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.viewport().setCursor(Qt.CursorShape.PointingHandCursor)

    def setup_custom_style(self):
        self.document().setDefaultStyleSheet(token_stylesheet())

    def update_content(self, state):
        self.preserve_scroll_position(lambda: self.setHtml(render_document(state)))

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return
        # Ignore drags that selected text
        if self.textCursor().hasSelection():
            return
        pos = event.position()
        point = QPointF(pos.x() + self.horizontalScrollBar().value(),
                        pos.y() + self.verticalScrollBar().value())
        line = line_at(self.document(), point)
        if line is not None:
            self.lineClicked.emit(line)
