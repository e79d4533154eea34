import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QSplitter, QFileDialog,
    QListWidget, QListWidgetItem, QPushButton, QLabel, QLineEdit, QAction,
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

# Component imports
from components.gesture import is_active
from components.gesture_controller import GestureController
from components.overlay_canvas import OverlayCanvas, rotation_degrees, scale_percent

# Model imports
from models.overlay_registry import OverlayRegistry

# Service imports
from services.boundary_loader import find_boundary, load_boundaries
from services.map_adapter import WebMercatorMapAdapter
from services.settings import load_settings

# Utility imports
from utils.geo_utils import format_area
from utils.logger import loggerRaise, set_main_window
from version import get_version


class TrueSizeWindow(QMainWindow):
    """Main window: boundary list, map canvas and overlay list"""

    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle(f"True Size Overlay {get_version()}")
        self.resize(1280, 720)
        self._logger = logging.getLogger('TrueSize')

        self.settings = settings if settings else load_settings()
        self.boundaries = []

        self.registry = OverlayRegistry()
        self.map_adapter = WebMercatorMapAdapter(
            1000, 720, center=self.settings.map_center, zoom=self.settings.map_zoom,
        )
        self.controller = GestureController(self.registry, self.map_adapter, self.settings, parent=self)

        set_main_window(self)

        self._setup_ui()
        self._setup_menu()
        self.registry.add_listener(self._on_registry_changed)
        self.controller.gestureEnded.connect(lambda overlay_id: self._refresh_overlay_list())

    # ========================================
    # UI setup
    # ========================================

    def _setup_ui(self):
        splitter = QSplitter(Qt.Horizontal)

        # Left: searchable boundary list
        left = QWidget()
        left_layout = QVBoxLayout(left)
        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText("Search boundaries...")
        self.search_box.textChanged.connect(self._filter_boundaries)
        self.search_box.returnPressed.connect(self._add_search_result)
        self.boundary_list = QListWidget()
        self.boundary_list.itemDoubleClicked.connect(self._on_boundary_activated)
        left_layout.addWidget(self.search_box)
        left_layout.addWidget(self.boundary_list)

        # Center: map
        self.canvas = OverlayCanvas(self.registry, self.controller, self.map_adapter)

        # Right: overlays
        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.addWidget(QLabel("Overlays"))
        self.overlay_list = QListWidget()
        self.overlay_list.currentItemChanged.connect(self._on_overlay_item_changed)
        self.overlay_list.itemDoubleClicked.connect(self._on_overlay_item_activated)
        right_layout.addWidget(self.overlay_list)

        buttons = QHBoxLayout()
        for label, slot in (("Reset", self.reset_selected), ("Remove", self.remove_selected),
                            ("Clear All", self.clear_all)):
            button = QPushButton(label)
            button.clicked.connect(slot)
            buttons.addWidget(button)
        right_layout.addLayout(buttons)

        self.hint_label = QLabel("Double-click an overlay to move it. Shift-drag rotates.")
        self.hint_label.setWordWrap(True)
        right_layout.addWidget(self.hint_label)

        splitter.addWidget(left)
        splitter.addWidget(self.canvas)
        splitter.addWidget(right)
        splitter.setSizes([220, 840, 220])
        self.setCentralWidget(splitter)
        self.statusBar().showMessage("Open a GeoJSON file to begin")

    def _setup_menu(self):
        file_menu = self.menuBar().addMenu("&File")
        open_action = QAction("&Open Boundaries...", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self.open_boundaries)
        file_menu.addAction(open_action)
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = self.menuBar().addMenu("&View")
        zoom_in = QAction("Zoom &In", self)
        zoom_in.setShortcut(QKeySequence.ZoomIn)
        zoom_in.triggered.connect(lambda: self._zoom(1))
        zoom_out = QAction("Zoom &Out", self)
        zoom_out.setShortcut(QKeySequence.ZoomOut)
        zoom_out.triggered.connect(lambda: self._zoom(-1))
        view_menu.addAction(zoom_in)
        view_menu.addAction(zoom_out)

    # ========================================
    # Boundaries
    # ========================================

    def open_boundaries(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Boundaries", "", "GeoJSON (*.geojson *.json);;All Files (*)"
        )
        if path:
            self.load_file(path)

    def load_file(self, path, country=None):
        try:
            self.boundaries = load_boundaries(path, country)
        except Exception as e:
            loggerRaise(e, f"Failed to load boundaries from {path}")
        self._filter_boundaries(self.search_box.text())
        self.statusBar().showMessage(f"Loaded {len(self.boundaries)} boundaries from {os.path.basename(path)}")

    def _filter_boundaries(self, text):
        needle = text.strip().lower()
        self.boundary_list.clear()
        for feature in self.boundaries:
            if needle and needle not in feature.name.lower():
                continue
            item = QListWidgetItem(f"{feature.name} ({feature.country})")
            item.setData(Qt.UserRole, feature)
            self.boundary_list.addItem(item)

    def _add_search_result(self):
        feature = find_boundary(self.boundaries, self.search_box.text())
        if feature is not None:
            self.add_boundary(feature)

    def _on_boundary_activated(self, item):
        self.add_boundary(item.data(Qt.UserRole))

    def add_boundary(self, feature):
        overlay_id = self.registry.add_overlay(feature)
        centroid = self.registry.get_overlay(overlay_id).centroid
        self.map_adapter.set_center(centroid[0], centroid[1])
        self.canvas.update()
        return overlay_id

    # ========================================
    # Overlays
    # ========================================

    def reset_selected(self):
        overlay_id = self.registry.selected_id
        if overlay_id is not None:
            self.controller.release_overlays([overlay_id])
            self.registry.reset_overlay(overlay_id)

    def remove_selected(self):
        overlay_id = self.registry.selected_id
        if overlay_id is not None:
            self.registry.remove_overlay(overlay_id)

    def clear_all(self):
        self.registry.clear_all()

    def _zoom(self, direction):
        if direction > 0:
            self.map_adapter.zoom_in()
        else:
            self.map_adapter.zoom_out()
        self.canvas.update()

    def _on_overlay_item_changed(self, current, previous):
        if is_active(self.controller.state):
            # Selection is locked to the gesture target until it ends
            self._sync_selection()
            return
        if current is not None:
            self.registry.select_overlay(current.data(Qt.UserRole))

    def _on_overlay_item_activated(self, item):
        self.controller.double_activate(item.data(Qt.UserRole))

    def _on_registry_changed(self, event, overlay_id):
        # Per-move updates only touch the status bar
        if event == 'updated':
            self._show_selected_status()
        elif event == 'selected':
            self._sync_selection()
        else:
            self._refresh_overlay_list()

    def _sync_selection(self):
        self.overlay_list.blockSignals(True)
        for row in range(self.overlay_list.count()):
            item = self.overlay_list.item(row)
            if item.data(Qt.UserRole) == self.registry.selected_id:
                self.overlay_list.setCurrentItem(item)
        self.overlay_list.blockSignals(False)
        self._show_selected_status()

    def _refresh_overlay_list(self):
        self.overlay_list.blockSignals(True)
        self.overlay_list.clear()
        for snapshot in self.registry.snapshots():
            area = format_area(snapshot.area_km2)
            text = (f"{snapshot.name}\n{area['km2']} km² ({area['mi2']} mi²)\n"
                    f"{scale_percent(snapshot)}% size, {rotation_degrees(snapshot)}°")
            if snapshot.edit_enabled:
                text += "  [editing]"
            item = QListWidgetItem(text)
            item.setData(Qt.UserRole, snapshot.id)
            self.overlay_list.addItem(item)
            if snapshot.selected:
                self.overlay_list.setCurrentItem(item)
        self.overlay_list.blockSignals(False)
        self._show_selected_status()

    def _show_selected_status(self):
        overlay = self.registry.get_selected_overlay()
        if overlay is None:
            return
        snapshot = self.registry.snapshot(overlay.id)
        self.statusBar().showMessage(
            f"{snapshot.name}: appears {scale_percent(snapshot)}% of its true size "
            f"(x{snapshot.mercator_scale:.2f}), rotated {rotation_degrees(snapshot)}°"
        )


def main(argv=None):
    """Main entry point for the True Size Overlay application"""
    parser = argparse.ArgumentParser(description='Drag boundaries across a Mercator map to see their true size.')
    parser.add_argument('geojson', nargs='?', help='GeoJSON FeatureCollection of boundaries to load.')
    parser.add_argument('--name', help='Add an overlay for this boundary on startup.')
    parser.add_argument('--country', help='Country tag for every loaded boundary (e.g. US).')
    parser.add_argument('--config', help='Settings file (default: ~/.truesize_overlay/config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setStyle("Fusion")

    window = TrueSizeWindow(load_settings(args.config))
    if args.geojson:
        window.load_file(args.geojson, args.country)
        if args.name:
            feature = find_boundary(window.boundaries, args.name)
            if feature is None:
                window.statusBar().showMessage(f"No boundary matching '{args.name}'")
            else:
                window.add_boundary(feature)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
