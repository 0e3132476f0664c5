"""
Result viewer window for stack-diff.

Shows the ranked Changed / Left only / Right only lists in tabbed tables
with the full stack body of the selected row underneath.
"""

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QTabWidget, QTableWidget,
    QTableWidgetItem, QHeaderView, QTextEdit, QSplitter, QLabel, QAbstractItemView
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from ..core.diff_engine import DiffResult
from ..utils.config import DiffOptions
from .rows import ResultTable, build_tables

logger = logging.getLogger(__name__)

DARK_STYLE = """
    QMainWindow, QWidget {
        background-color: #0D1117;
        color: #E6EDF3;
    }
    QTableWidget {
        background-color: #161B22;
        gridline-color: #30363D;
        border: 1px solid #30363D;
        border-radius: 4px;
    }
    QHeaderView::section {
        background-color: #21262D;
        color: #8B949E;
        border: none;
        padding: 4px;
    }
    QTabBar::tab {
        background-color: #161B22;
        color: #8B949E;
        padding: 6px 14px;
    }
    QTabBar::tab:selected {
        background-color: #21262D;
        color: #E6EDF3;
    }
"""


class ResultTableWidget(QTableWidget):
    """Read-only table for one result section."""

    def __init__(self, table: ResultTable, parent=None):
        super().__init__(len(table.rows), len(table.headers), parent)
        self.bodies: List[str] = table.bodies

        self.setHorizontalHeaderLabels(list(table.headers))
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.verticalHeader().setVisible(False)

        header = self.horizontalHeader()
        for col in range(len(table.headers) - 1):
            header.setSectionResizeMode(col, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(len(table.headers) - 1, QHeaderView.ResizeMode.Stretch)

        for row, cells in enumerate(table.rows):
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if col < len(cells) - 1:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
                self.setItem(row, col, item)


class DiffResultWindow(QMainWindow):
    """Main window of the result viewer."""

    def __init__(self, result: DiffResult, options: DiffOptions, parent=None):
        super().__init__(parent)
        self.options = options
        self.tables = build_tables(result, options.omit_identical)

        self.setWindowTitle(f"stack-diff: {options.left} vs {options.right}")
        self.resize(1100, 750)
        self.setStyleSheet(DARK_STYLE)

        self._setup_ui()

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)

        summary = QLabel(
            f"over={self.options.over}  diff={self.options.diff}  "
            f"omit identical={'on' if self.options.omit_identical else 'off'}"
        )
        summary.setStyleSheet("color: #8B949E;")
        layout.addWidget(summary)

        splitter = QSplitter(Qt.Orientation.Vertical)

        self.tabs = QTabWidget()
        self.table_widgets: List[ResultTableWidget] = []
        for table in self.tables:
            widget = ResultTableWidget(table)
            widget.itemSelectionChanged.connect(self._on_selection_changed)
            self.table_widgets.append(widget)
            self.tabs.addTab(widget, table.title)
        self.tabs.currentChanged.connect(lambda _index: self._on_selection_changed())
        splitter.addWidget(self.tabs)

        self.detail_view = QTextEdit()
        self.detail_view.setReadOnly(True)
        self.detail_view.setLineWrapMode(QTextEdit.LineWrapMode.NoWrap)
        self.detail_view.setFont(QFont("Consolas", 10))
        self.detail_view.setPlaceholderText("Select a stack to see its full body")
        splitter.addWidget(self.detail_view)
        splitter.setSizes([450, 300])

        layout.addWidget(splitter)
        self.setCentralWidget(central)

    def selected_body(self) -> Optional[str]:
        """Full body of the selected row in the current tab, if any."""
        widget = self.tabs.currentWidget()
        if not isinstance(widget, ResultTableWidget):
            return None
        rows = widget.selectionModel().selectedRows()
        if not rows:
            return None
        return widget.bodies[rows[0].row()]

    def _on_selection_changed(self):
        body = self.selected_body()
        self.detail_view.setPlainText(body if body is not None else "")


def launch_viewer(result: DiffResult, options: DiffOptions) -> int:
    """Show the viewer for a computed result and run the Qt event loop."""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("stack-diff")

    window = DiffResultWindow(result, options)
    window.show()
    logger.info("Result viewer opened")
    return app.exec()
