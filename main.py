import sys
import platform
import logging
from functools import partial
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QFileDialog, QMessageBox, QStatusBar,
    QVBoxLayout, QHBoxLayout, QWidget, QLabel, QPushButton, QCheckBox,
    QComboBox, QSlider, QFrame, QPlainTextEdit,
)
from PyQt6.QtGui import (
    QAction, QFont, QColor, QPalette, QKeySequence, QPainter, QIcon,
    QActionGroup, QPixmap,
)
from PyQt6.QtCore import Qt, QTimer, QDir
from PyQt6.QtSvg import QSvgRenderer

from components.base_preview_viewer import SplitPreviewWidget
from components.highlighted_view import HighlightedView
from components.stats_panel import StatsPanel
from utils import view_state
from utils.actions import (
    copy_to_clipboard, write_download, DOWNLOAD_FILENAME, DOWNLOAD_MIME_TYPE,
)
from utils.code_stats import compute_stats
from utils.themes import get_theme, window_stylesheet, ACCENTS


# --- Configuration ---
APP_NAME = "React Code Visualizer"
ORG_NAME = "CodeVisualizer"
NOTICE_TIMEOUT_MS = 3000
EDITOR_PLACEHOLDER = "Enter your React code here..."
EDITOR_FONT = 'Consolas' if platform.system() == 'Windows' else 'Menlo'


# --- Icon System ---
class Icons:
    """Minimal icon system using inline SVG with caching."""

    def __init__(self):
        self._icon_cache = {}

    def get_icon(self, svg_str, color="#f3f4f6"):
        """Get cached icon or create new one."""
        cache_key = f"{svg_str}_{color}"

        if cache_key not in self._icon_cache:
            self._icon_cache[cache_key] = self._create_icon(svg_str, color)

        return self._icon_cache[cache_key]

    @staticmethod
    def _create_icon(svg_str, color="#f3f4f6"):
        """Create QIcon from SVG string."""
        svg_data = svg_str.replace("currentColor", color).encode('utf-8')

        pixmap = QPixmap(32, 32)
        pixmap.fill(Qt.GlobalColor.transparent)

        renderer = QSvgRenderer(svg_data)
        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        renderer.render(painter)
        painter.end()

        return QIcon(pixmap)

    # Icon definitions
    COPY = '''<svg width="16" height="16" viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
        <path fill="currentColor" d="M4 2a1 1 0 0 0-1 1v8a1 1 0 0 0 1 1h6a1 1 0 0 0 1-1V3a1 1 0 0 0-1-1H4zm0 1h6v8H4V3zm2 10v1h6a1 1 0 0 0 1-1V5h-1v8H6z"/>
    </svg>'''

    DOWNLOAD = '''<svg width="16" height="16" viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
        <path fill="currentColor" d="M7.25 1h1.5v7.19l2.47-2.47 1.06 1.06L8 11.06 3.72 6.78l1.06-1.06 2.47 2.47V1zM2 12.5h1.5V14h9v-1.5H14V15.5H2v-3z"/>
    </svg>'''

    CODE = '''<svg width="16" height="16" viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
        <path fill="currentColor" d="M5.3 4.3 1.6 8l3.7 3.7 1.06-1.06L3.72 8l2.64-2.64L5.3 4.3zm5.4 0-1.06 1.06L12.28 8l-2.64 2.64 1.06 1.06L14.4 8l-3.7-3.7z"/>
    </svg>'''

    EYE = '''<svg width="16" height="16" viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
        <path fill="currentColor" d="M8 3C4.5 3 1.7 5.3 1 8c.7 2.7 3.5 5 7 5s6.3-2.3 7-5c-.7-2.7-3.5-5-7-5zm0 8.5A3.5 3.5 0 1 1 8 4.5a3.5 3.5 0 0 1 0 7zM8 6a2 2 0 1 0 0 4 2 2 0 0 0 0-4z"/>
    </svg>'''

    PALETTE = '''<svg width="16" height="16" viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
        <path fill="currentColor" d="M8 1a7 7 0 0 0 0 14c.8 0 1.3-.6 1.3-1.3 0-.4-.1-.7-.4-.9-.2-.3-.4-.6-.4-.9 0-.7.6-1.3 1.3-1.3h1.5A3.7 3.7 0 0 0 15 6.9C15 3.6 11.9 1 8 1zM4 8.5a1 1 0 1 1 0-2 1 1 0 0 1 0 2zm2-3a1 1 0 1 1 0-2 1 1 0 0 1 0 2zm4 0a1 1 0 1 1 0-2 1 1 0 0 1 0 2zm2 3a1 1 0 1 1 0-2 1 1 0 0 1 0 2z"/>
    </svg>'''


# --- Logging Setup ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


# --- Main Application ---
class CodeVisualizer(QMainWindow):
    """
    Owns the current ViewState. Every input event dispatches one reducer
    from utils.view_state and the whole window is re-rendered from the
    resulting state.
    """

    def __init__(self):
        super().__init__()
        self.state = view_state.initial_state()
        self._applied_theme = None
        self.icons = Icons()

        self.initUI()
        self.createMenus()
        self.setupTimers()
        self.render()

    def initUI(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1280, 860)

        central_widget = QWidget()
        central_widget.setObjectName("central")
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(24)

        layout.addLayout(self.create_header())
        layout.addWidget(self.create_controls())

        # Editor and highlighted panes
        self.text_edit = QPlainTextEdit()
        self.text_edit.setPlaceholderText(EDITOR_PLACEHOLDER)
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.text_edit.setPlainText(self.state.text)

        self.viewer = HighlightedView(get_theme(self.state.theme))

        self.panes = SplitPreviewWidget(
            self.create_pane("Code Editor", Icons.EYE, self.text_edit),
            self.create_pane("Syntax Highlighted", Icons.CODE, self.viewer),
        )
        layout.addWidget(self.panes, 1)

        self.stats_panel = StatsPanel()
        layout.addWidget(self.stats_panel)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        # Connections
        self.text_edit.textChanged.connect(self.on_text_changed)
        self.viewer.lineClicked.connect(partial(self.dispatch, view_state.toggle_pin))

    def create_header(self):
        header = QHBoxLayout()

        logo = QLabel()
        logo.setPixmap(self.icons.get_icon(Icons.CODE, ACCENTS["title_icon"]).pixmap(32, 32))
        header.addWidget(logo)

        title = QLabel(APP_NAME)
        title.setObjectName("title")
        header.addWidget(title)
        header.addStretch(1)

        self.copy_button = QPushButton("Copy")
        self.copy_button.setObjectName("copyButton")
        self.copy_button.setIcon(self.icons.get_icon(Icons.COPY, "#ffffff"))
        self.copy_button.clicked.connect(self.copy_code)
        header.addWidget(self.copy_button)

        self.download_button = QPushButton("Download")
        self.download_button.setObjectName("downloadButton")
        self.download_button.setIcon(self.icons.get_icon(Icons.DOWNLOAD, "#ffffff"))
        self.download_button.clicked.connect(self.download_code)
        header.addWidget(self.download_button)

        return header

    def create_controls(self):
        frame = QFrame()
        frame.setObjectName("section")
        row = QHBoxLayout(frame)
        row.setContentsMargins(16, 16, 16, 16)
        row.setSpacing(24)

        palette_icon = QLabel()
        palette_icon.setPixmap(self.icons.get_icon(Icons.PALETTE, "#9ca3af").pixmap(16, 16))
        row.addWidget(palette_icon)
        row.addWidget(QLabel("Theme:"))
        self.theme_combo = QComboBox()
        for name in view_state.THEME_NAMES:
            self.theme_combo.addItem(name.capitalize(), name)
        self.theme_combo.currentIndexChanged.connect(
            lambda _index: self.dispatch(view_state.select_theme, self.theme_combo.currentData()))
        row.addWidget(self.theme_combo)

        row.addWidget(QLabel("Font Size:"))
        self.font_slider = QSlider(Qt.Orientation.Horizontal)
        self.font_slider.setRange(view_state.FONT_SIZE_MIN, view_state.FONT_SIZE_MAX)
        self.font_slider.setFixedWidth(120)
        self.font_slider.valueChanged.connect(partial(self.dispatch, view_state.set_font_size))
        row.addWidget(self.font_slider)
        self.font_size_label = QLabel()
        row.addWidget(self.font_size_label)

        self.line_numbers_check = QCheckBox("Show Line Numbers")
        self.line_numbers_check.toggled.connect(partial(self.dispatch, view_state.set_line_numbers))
        row.addWidget(self.line_numbers_check)

        row.addStretch(1)
        return frame

    def create_pane(self, title_text, icon_svg, body):
        frame = QFrame()
        frame.setObjectName("section")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QHBoxLayout()
        header.setContentsMargins(12, 12, 12, 12)
        title = QLabel(title_text)
        title.setObjectName("paneTitle")
        header.addWidget(title)
        header.addStretch(1)
        icon = QLabel()
        icon.setPixmap(self.icons.get_icon(icon_svg, "#9ca3af").pixmap(20, 20))
        header.addWidget(icon)
        layout.addLayout(header)

        layout.addWidget(body, 1)
        return frame

    def createMenus(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu('&File')
        copy_action = self.add_menu_action(file_menu, '&Copy Code', self.copy_code,
                                           QKeySequence("Ctrl+Shift+C"))
        copy_action.setIcon(self.icons.get_icon(Icons.COPY))
        download_action = self.add_menu_action(file_menu, '&Download...', self.download_code,
                                               QKeySequence.StandardKey.Save)
        download_action.setIcon(self.icons.get_icon(Icons.DOWNLOAD))
        file_menu.addSeparator()
        self.add_menu_action(file_menu, 'E&xit', self.close, QKeySequence.StandardKey.Quit)

        view_menu = menu_bar.addMenu('&View')
        theme_menu = view_menu.addMenu('&Theme')
        self.theme_group = QActionGroup(self)
        self.theme_actions = {}
        for name in view_state.THEME_NAMES:
            action = QAction(name.capitalize(), self, checkable=True)
            action.triggered.connect(lambda checked, n=name: self.dispatch(view_state.select_theme, n) if checked else None)
            theme_menu.addAction(action)
            self.theme_group.addAction(action)
            self.theme_actions[name] = action

        self.lines_action = self.add_menu_action(view_menu, 'Show &Line Numbers',
                                                 self.toggle_line_numbers, checkable=True)
        view_menu.addSeparator()
        self.add_menu_action(view_menu, 'Zoom &In', self.zoom_in,
                             QKeySequence.StandardKey.ZoomIn)
        self.add_menu_action(view_menu, 'Zoom &Out', self.zoom_out,
                             QKeySequence.StandardKey.ZoomOut)
        self.add_menu_action(view_menu, '&Reset Zoom', self.reset_zoom,
                             QKeySequence(Qt.Modifier.CTRL | Qt.Key.Key_0))
        view_menu.addSeparator()
        self.chain_action = self.add_menu_action(view_menu, 'Regex &Chain Highlighting',
                                                 self.toggle_chain_highlighting, checkable=True)
        self.add_menu_action(view_menu, 'Clear &Pinned Line', self.clear_pin)

    def add_menu_action(self, menu, text, slot, shortcut=None, checkable=False, checked=False):
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(shortcut)
        if checkable:
            action.setCheckable(True)
            action.setChecked(checked)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def setupTimers(self):
        # Clears the transient notice; restarted by every new notice
        self.notice_timer = QTimer(self)
        self.notice_timer.setSingleShot(True)
        self.notice_timer.timeout.connect(lambda: self.dispatch(view_state.clear_notice))

    # --- State ---
    def dispatch(self, reducer, *args):
        self.state = reducer(self.state, *args)
        self.render()

    def render(self):
        state = self.state
        colors = get_theme(state.theme)

        if state.theme != self._applied_theme:
            self.setupTheme(colors)
            self._applied_theme = state.theme

        self.sync_controls(state)

        font = QFont(EDITOR_FONT)
        font.setPixelSize(state.font_size)
        self.text_edit.setFont(font)

        self.viewer.update_content(state)
        self.stats_panel.update_stats(compute_stats(state.text))

        if state.notice:
            self.status_bar.showMessage(state.notice)
        else:
            self.status_bar.clearMessage()

    def sync_controls(self, state):
        """Push state into the controls without re-triggering their signals."""
        widgets = (self.theme_combo, self.font_slider, self.line_numbers_check,
                   self.lines_action, self.chain_action, *self.theme_actions.values())
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self.theme_combo.setCurrentIndex(self.theme_combo.findData(state.theme))
            self.font_slider.setValue(state.font_size)
            self.line_numbers_check.setChecked(state.show_line_numbers)
            self.lines_action.setChecked(state.show_line_numbers)
            self.chain_action.setChecked(state.highlight_mode == "chain")
            self.theme_actions[state.theme].setChecked(True)
        finally:
            for widget in widgets:
                widget.blockSignals(False)
        self.font_size_label.setText(f"{state.font_size}px")

    def setupTheme(self, colors):
        palette = QPalette()
        palette.setColor(QPalette.ColorRole.Window, QColor(colors["bg"]))
        palette.setColor(QPalette.ColorRole.WindowText, QColor(colors["text"]))
        palette.setColor(QPalette.ColorRole.Base, QColor(colors["bg"]))
        palette.setColor(QPalette.ColorRole.Text, QColor(colors["text"]))
        palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(colors["line_number"]))
        palette.setColor(QPalette.ColorRole.Highlight, QColor(colors["highlight"]))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor(colors["text"]))

        QApplication.instance().setPalette(palette)
        QApplication.instance().setStyleSheet(window_stylesheet(colors))
        self.viewer.apply_theme(colors)

    def notify(self, message):
        self.dispatch(view_state.post_notice, message)
        self.notice_timer.stop()
        self.notice_timer.start(NOTICE_TIMEOUT_MS)

    # --- Events ---
    def on_text_changed(self):
        self.dispatch(view_state.edit_text, self.text_edit.toPlainText())

    def toggle_line_numbers(self):
        self.dispatch(view_state.set_line_numbers, self.lines_action.isChecked())

    def toggle_chain_highlighting(self):
        mode = "chain" if self.chain_action.isChecked() else "tokens"
        self.dispatch(view_state.set_highlight_mode, mode)

    def clear_pin(self):
        if self.state.pinned_line is not None:
            self.dispatch(view_state.toggle_pin, self.state.pinned_line)

    def zoom_in(self):
        self.dispatch(view_state.set_font_size, self.state.font_size + 1)

    def zoom_out(self):
        self.dispatch(view_state.set_font_size, self.state.font_size - 1)

    def reset_zoom(self):
        self.dispatch(view_state.set_font_size, view_state.FONT_SIZE_DEFAULT)

    # --- Actions ---
    def copy_code(self):
        if copy_to_clipboard(QApplication.clipboard(), self.state.text):
            self.notify("Code copied to clipboard!")
        else:
            self.notify("Failed to copy code")

    def download_code(self):
        dialog = QFileDialog(self, "Download Code", QDir.homePath())
        dialog.setAcceptMode(QFileDialog.AcceptMode.AcceptSave)
        dialog.setMimeTypeFilters([DOWNLOAD_MIME_TYPE, "application/octet-stream"])
        dialog.setDefaultSuffix("js")
        dialog.selectFile(DOWNLOAD_FILENAME)
        if not dialog.exec():
            return

        try:
            target = write_download(dialog.selectedFiles()[0], self.state.text)
        except OSError as e:
            logging.exception(f"Download failed: {e}")
            QMessageBox.critical(self, "Error", str(e))
            self.notify("Download failed")
            return
        self.notify(f"Downloaded {target.name}")

    def closeEvent(self, event):
        self.notice_timer.stop()
        event.accept()


def main():
    app = QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)

    visualizer = CodeVisualizer()
    visualizer.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
