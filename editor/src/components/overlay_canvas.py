"""
Overlay Canvas - Draws overlays over the map and feeds input to the gesture controller

Provides:
- Filled, outlined overlay polygons (selected overlay highlighted)
- Preview geometry drawn over the committed shape while a gesture runs
- Hit testing for press/double-click targets
- Mouse and touch translation into PointerEvents
- Map drag-to-pan and wheel zoom when no gesture holds the lock
"""

import logging
import math

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QEvent, QPointF
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QPainterPath, QPolygonF

from constants import (
	MAP_BACKGROUND_COLOR, OVERLAY_FILL_OPACITY, OVERLAY_FILL_OPACITY_SELECTED,
	OVERLAY_OUTLINE_COLOR_SELECTED, OVERLAY_OUTLINE_WIDTH, OVERLAY_OUTLINE_WIDTH_SELECTED,
	ROTATE_MODIFIER,
)
from components.gesture import BUTTON_PRIMARY, BUTTON_SECONDARY, PointerEvent, is_active
from utils.geo_utils import is_point


def scale_percent(snapshot):
	"""Mercator scale as a whole percentage (e.g. 200 for 2x)"""
	return round(snapshot.mercator_scale * 100)


def rotation_degrees(snapshot):
	"""Rotation in whole degrees"""
	return round(math.degrees(snapshot.rotation))


def iter_rings(coordinates):
	"""Yield every ring (list of points) of a coordinate tree"""
	if not coordinates:
		return
	if is_point(coordinates[0]):
		yield coordinates
		return
	for child in coordinates:
		yield from iter_rings(child)


class OverlayCanvas(QWidget):
	"""Map surface showing every overlay in the registry"""

	def __init__(self, registry, controller, map_adapter, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('OverlayCanvas')
		self.setAttribute(Qt.WA_AcceptTouchEvents)
		self.setFocusPolicy(Qt.StrongFocus)

		self.registry = registry
		self.controller = controller
		self.map_adapter = map_adapter

		# Map drag-to-pan anchor (screen pos of last move)
		self._pan_anchor = None

		registry.add_listener(self._on_registry_changed)
		controller.stateChanged.connect(self._on_controller_changed)
		controller.previewChanged.connect(self._on_controller_changed)
		controller.edge_panner.panned.connect(self._on_controller_changed)

	# ========================================
	# Geometry
	# ========================================

	def _ring_polygon(self, ring):
		polygon = QPolygonF()
		for point in ring:
			x, y = self.map_adapter.geo_to_screen(point[0], point[1])
			polygon.append(QPointF(x, y))
		return polygon

	def _polygons(self, geometry):
		return [self._ring_polygon(ring) for ring in iter_rings(geometry)]

	def _path(self, geometry):
		path = QPainterPath()
		path.setFillRule(Qt.OddEvenFill)
		for polygon in self._polygons(geometry):
			path.addPolygon(polygon)
			path.closeSubpath()
		return path

	def overlay_at(self, x, y):
		"""Topmost overlay containing a screen point (holes excluded), or None"""
		point = QPointF(x, y)
		for snapshot in reversed(self.registry.snapshots()):
			inside = 0
			for polygon in self._polygons(snapshot.geometry):
				if polygon.containsPoint(point, Qt.OddEvenFill):
					inside += 1
			if inside % 2 == 1:
				return snapshot.id
		return None

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		"""Draw the map background and overlays"""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(MAP_BACKGROUND_COLOR))

		preview = self.controller.preview
		for snapshot in self.registry.snapshots():
			self._paint_overlay(painter, snapshot)
			if preview is not None and preview.overlay_id == snapshot.id:
				self._paint_preview(painter, snapshot, preview)

		selected = self.registry.get_selected_overlay()
		if selected is not None:
			self._paint_label(painter, self.registry.snapshot(selected.id))
		painter.end()

	def _paint_overlay(self, painter, snapshot):
		fill = QColor(snapshot.color)
		if snapshot.selected:
			fill.setAlphaF(OVERLAY_FILL_OPACITY_SELECTED)
			pen = QPen(QColor(OVERLAY_OUTLINE_COLOR_SELECTED), OVERLAY_OUTLINE_WIDTH_SELECTED)
		else:
			fill.setAlphaF(OVERLAY_FILL_OPACITY)
			pen = QPen(QColor(snapshot.color), OVERLAY_OUTLINE_WIDTH)
		if snapshot.edit_enabled:
			pen.setStyle(Qt.DashLine)
		painter.setPen(pen)
		painter.setBrush(QBrush(fill))
		painter.drawPath(self._path(snapshot.geometry))

	def _paint_preview(self, painter, snapshot, preview):
		fill = QColor(snapshot.color)
		fill.setAlphaF(OVERLAY_FILL_OPACITY_SELECTED)
		pen = QPen(QColor(OVERLAY_OUTLINE_COLOR_SELECTED), OVERLAY_OUTLINE_WIDTH)
		pen.setStyle(Qt.DotLine)
		painter.setPen(pen)
		painter.setBrush(QBrush(fill))
		painter.drawPath(self._path(preview.geometry))

	def _paint_label(self, painter, snapshot):
		text = f"{snapshot.name}: {scale_percent(snapshot)}% size"
		degrees = rotation_degrees(snapshot)
		if degrees:
			text += f", {degrees}°"
		painter.setPen(QPen(QColor(OVERLAY_OUTLINE_COLOR_SELECTED)))
		painter.drawText(10, self.height() - 10, text)

	# ========================================
	# Mouse input
	# ========================================

	def _mouse_event(self, event, target_id=None):
		if event.button() == Qt.RightButton:
			button = BUTTON_SECONDARY
		else:
			button = BUTTON_PRIMARY
		modifiers = set()
		if event.modifiers() & Qt.ShiftModifier:
			modifiers.add(ROTATE_MODIFIER)
		return PointerEvent.mouse(event.pos().x(), event.pos().y(), target_id=target_id,
		                          button=button, modifiers=modifiers)

	def mousePressEvent(self, event):
		"""Start a gesture on an overlay, or a map pan on empty space"""
		if is_active(self.controller.state):
			event.accept()
			return
		target_id = self.overlay_at(event.pos().x(), event.pos().y())
		if target_id is not None and event.button() == Qt.LeftButton:
			self.registry.select_overlay(target_id)
		self.controller.press(self._mouse_event(event, target_id))

		if is_active(self.controller.state):
			event.accept()
			return
		if event.button() == Qt.LeftButton and self.map_adapter.default_panning_enabled:
			self._pan_anchor = event.pos()
		event.accept()

	def mouseMoveEvent(self, event):
		"""Track the gesture, or pan the map"""
		if is_active(self.controller.state):
			self.controller.move(self._mouse_event(event))
			event.accept()
			return
		if self._pan_anchor is not None:
			delta = event.pos() - self._pan_anchor
			self._pan_anchor = event.pos()
			self.map_adapter.pan_by(-delta.x(), -delta.y())
			self.update()
			event.accept()
			return
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		"""End the gesture or map pan"""
		self._pan_anchor = None
		if is_active(self.controller.state):
			self.controller.release(None)
		event.accept()

	def mouseDoubleClickEvent(self, event):
		"""Toggle edit mode on the overlay under the pointer"""
		target_id = self.overlay_at(event.pos().x(), event.pos().y())
		if target_id is not None:
			self.controller.double_activate(target_id)
		event.accept()

	def wheelEvent(self, event):
		"""Zoom the map one level per wheel notch"""
		if is_active(self.controller.state):
			event.accept()
			return
		if event.angleDelta().y() > 0:
			self.map_adapter.zoom_in()
		elif event.angleDelta().y() < 0:
			self.map_adapter.zoom_out()
		self.update()
		event.accept()

	def resizeEvent(self, event):
		self.map_adapter.resize(self.width(), self.height())
		super().resizeEvent(event)

	# ========================================
	# Touch input
	# ========================================

	def event(self, event):
		if event.type() in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd):
			self._touch_event(event)
			event.accept()
			return True
		if event.type() == QEvent.TouchCancel:
			self.controller.cancel()
			event.accept()
			return True
		return super().event(event)

	def _touch_event(self, event):
		touch_points = event.touchPoints()
		down = [tp for tp in touch_points if tp.state() != Qt.TouchPointReleased]
		points = [(tp.pos().x(), tp.pos().y()) for tp in down]

		if event.type() == QEvent.TouchEnd or not points:
			self.controller.release(None)
			return

		pressed = [tp for tp in touch_points if tp.state() == Qt.TouchPointPressed]
		released = len(down) < len(touch_points)

		if pressed:
			first = pressed[0].pos()
			target_id = self.overlay_at(first.x(), first.y())
			if target_id is None and is_active(self.controller.state):
				target_id = self.controller.locked_overlay_id
			if target_id is not None and not is_active(self.controller.state):
				self.registry.select_overlay(target_id)
			self.controller.press(PointerEvent.touch(*points, target_id=target_id))
		elif released:
			self.controller.release(PointerEvent.touch(*points))
		else:
			self.controller.move(PointerEvent.touch(*points))

	# ========================================
	# Notifications
	# ========================================

	def _on_registry_changed(self, event, overlay_id):
		self.update()

	def _on_controller_changed(self, *args):
		self.update()
