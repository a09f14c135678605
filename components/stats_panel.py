from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout
from PyQt6.QtCore import Qt

from utils.themes import STAT_COLORS

# (field on CodeStats, caption)
STAT_FIELDS = (
    ("lines", "Lines"),
    ("characters", "Characters"),
    ("words", "Words"),
    ("functions", "Functions"),
)


class StatsPanel(QFrame):
    """Four large figures under the panes, refreshed on every edit."""

    def __init__(self):
        super().__init__()
        self.setObjectName("section")
        self.value_labels = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Code Statistics")
        title.setObjectName("statsTitle")
        layout.addWidget(title)

        grid = QGridLayout()
        for column, (field, caption) in enumerate(STAT_FIELDS):
            value = QLabel("0")
            value.setAlignment(Qt.AlignmentFlag.AlignCenter)
            value.setStyleSheet(f"font-size: 24px; font-weight: bold; color: {STAT_COLORS[field]};")
            label = QLabel(caption)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet("font-size: 12px; color: #9ca3af;")
            grid.addWidget(value, 0, column)
            grid.addWidget(label, 1, column)
            self.value_labels[field] = value
        layout.addLayout(grid)

    def update_stats(self, stats):
        for field, _caption in STAT_FIELDS:
            self.value_labels[field].setText(f"{getattr(stats, field):,}")
