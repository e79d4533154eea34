"""Edge panning - scroll the map while a gesture pointer sits near the viewport edge."""

import logging

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from constants import EDGE_PAN_INTERVAL_MS, EDGE_PAN_SPEED, EDGE_PAN_THRESHOLD


class EdgePanner(QObject):
	"""Periodic pan timer owned by the active gesture.

	update() is fed the pointer position on every gesture move; the timer runs
	only while the pointer is inside the edge margin and is stopped by stop()
	when the gesture ends.
	"""

	panned = pyqtSignal(float, float)  # dx, dy applied on a tick

	def __init__(self, map_adapter, threshold=EDGE_PAN_THRESHOLD, speed=EDGE_PAN_SPEED,
	             interval_ms=EDGE_PAN_INTERVAL_MS, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('EdgePanner')
		self.map_adapter = map_adapter
		self.threshold = threshold
		self.speed = speed
		self._vector = (0, 0)
		self._timer = QTimer(self)
		self._timer.setInterval(int(interval_ms))
		self._timer.timeout.connect(self._tick)

	def pan_vector(self, x, y):
		"""Pan direction for a pointer position.

		Returns:
			(dx, dy): each -speed, 0 or +speed (toward the nearest edge(s))
		"""
		width, height = self.map_adapter.viewport_size()
		dx = 0
		dy = 0
		if x < self.threshold:
			dx = -self.speed
		elif width - x < self.threshold:
			dx = self.speed
		if y < self.threshold:
			dy = -self.speed
		elif height - y < self.threshold:
			dy = self.speed
		return dx, dy

	def update(self, x, y):
		"""Start, retarget or stop panning for the current pointer position"""
		vector = self.pan_vector(x, y)
		if vector == (0, 0):
			self.stop()
			return
		self._vector = vector
		if not self._timer.isActive():
			self._logger.debug(f"Edge pan started {vector}")
			self._timer.start()

	def stop(self):
		if self._timer.isActive():
			self._timer.stop()
			self._logger.debug("Edge pan stopped")
		self._vector = (0, 0)

	def is_active(self):
		return self._timer.isActive()

	@property
	def vector(self):
		return self._vector

	def _tick(self):
		dx, dy = self._vector
		self.map_adapter.pan_by(dx, dy)
		self.panned.emit(float(dx), float(dy))
