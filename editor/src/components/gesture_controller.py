"""
Gesture Controller - Drag and rotate overlays with mouse or touch

Turns pointer events into overlay transforms:
- One pointer on a selected, edit-enabled overlay drags it
- Two contacts (or one pointer with Shift) rotate it
- A second contact during a drag switches to rotation
- Near the viewport edge the map pans while the gesture continues

Every move is measured against the snapshot taken when the gesture started,
and geometry is always recomputed from the overlay's original geometry.
"""

import logging
from dataclasses import replace

from PyQt5.QtCore import QObject, pyqtSignal

from constants import COMMIT_MODE_LIVE, ROTATE_MODIFIER
from components.gesture import (
	BUTTON_NONE, BUTTON_PRIMARY, Dragging, EdgePanner, Idle, PreviewTransform,
	Rotating, is_active,
)
from models.transform import Vec2
from services.map_adapter import OutOfProjectionRangeError
from services.settings import Settings
from utils.coordinate_transforms import screen_angle
from utils.geo_utils import unwrap_angle


class GestureController(QObject):
	"""State machine owning the single gesture lock.

	State is one of Idle, Dragging or Rotating. press/move/release/cancel each
	return the (possibly unchanged) state. Input aimed at other overlays while
	a lock is held is ignored.
	"""

	# Signals
	stateChanged = pyqtSignal(object)    # new gesture state
	previewChanged = pyqtSignal(object)  # PreviewTransform or None
	gestureEnded = pyqtSignal(str)       # overlay id whose gesture finished

	def __init__(self, registry, map_adapter, settings=None, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('GestureController')
		self.registry = registry
		self.map_adapter = map_adapter
		self.settings = settings if settings else Settings()

		self._state = Idle()
		self._preview = None
		self._last_move = None  # re-applied after each edge-pan tick

		self.edge_panner = EdgePanner(
			map_adapter,
			threshold=self.settings.edge_pan_threshold,
			speed=self.settings.edge_pan_speed,
			interval_ms=self.settings.edge_pan_interval_ms,
			parent=self,
		)
		self.edge_panner.panned.connect(self._on_edge_panned)

		registry.add_removal_hook(self.release_overlays)

	@property
	def state(self):
		return self._state

	@property
	def preview(self):
		"""Uncommitted transform of the locked overlay ('on_release' mode only)"""
		return self._preview

	@property
	def locked_overlay_id(self):
		return self._state.overlay_id

	@property
	def live_commit(self):
		return self.settings.commit_mode == COMMIT_MODE_LIVE

	# ========================================
	# Input
	# ========================================

	def press(self, event):
		"""Pointer/contact down.

		Args:
			event: PointerEvent with every active contact
		"""
		state = self._state
		if isinstance(state, Idle):
			return self._begin(event)

		if isinstance(state, Dragging) and event.point_count >= 2:
			if event.target_id not in (None, state.overlay_id):
				self._logger.debug(f"Ignoring second contact on {event.target_id}, {state.overlay_id} is locked")
				return state
			return self._switch_to_rotating(state, event)

		self._logger.debug(f"Ignoring press while {type(state).__name__} on {state.overlay_id}")
		return state

	def move(self, event):
		"""Pointer/contact moved; recompute the locked overlay"""
		if not is_active(self._state):
			return self._state
		self._last_move = event
		self._track(event)
		self.edge_panner.update(*event.primary)
		return self._state

	def release(self, event=None):
		"""Pointer/contact up.

		Args:
			event: PointerEvent listing the contacts still down, or None when
				all are released
		"""
		state = self._state
		if not is_active(state):
			return state
		if event is not None and event.point_count > 0:
			# Still touching: gesture continues until the last contact lifts
			return state
		self._finish(commit=True)
		return self._state

	def cancel(self):
		"""Abort the gesture without committing any preview"""
		if is_active(self._state):
			self._finish(commit=False)
		return self._state

	def double_activate(self, target_id):
		"""Toggle edit mode on an overlay.

		Ignored for every overlay while a gesture is active: the lock is
		exclusive, so no other overlay changes mode mid-gesture either.

		Returns:
			The new edit-enabled flag, or None if ignored
		"""
		if is_active(self._state):
			self._logger.debug(f"Ignoring double activation on {target_id} during gesture")
			return None
		if target_id is None or target_id not in self.registry:
			return None
		return self.registry.toggle_edit_enabled(target_id)

	def release_overlays(self, overlay_ids):
		"""Registry removal hook: drop the lock if it points at a removed overlay"""
		if self._state.overlay_id in overlay_ids:
			self._logger.info(f"Overlay {self._state.overlay_id} removed during gesture, cancelling")
			self.cancel()

	# ========================================
	# Transitions
	# ========================================

	def _begin(self, event):
		target_id = event.target_id
		if target_id is None or target_id not in self.registry:
			return self._state
		if not (self.registry.is_selected(target_id) and self.registry.is_edit_enabled(target_id)):
			self._logger.debug(f"Overlay {target_id} is not selected and edit-enabled, no gesture")
			return self._state
		if event.button not in (BUTTON_PRIMARY, BUTTON_NONE):
			return self._state

		overlay = self.registry.get_overlay(target_id)

		if event.point_count >= 2:
			angle = self._two_point_angle(event)
			new_state = Rotating(target_id, angle, overlay.rotation, angle)
		elif ROTATE_MODIFIER in event.modifiers:
			pivot = Vec2(*overlay.centroid)
			angle = self._pivot_angle(pivot, event)
			new_state = Rotating(target_id, angle, overlay.rotation, angle, pivot_geo=pivot)
		else:
			try:
				lng, lat = self.map_adapter.screen_to_geo(*event.primary)
			except OutOfProjectionRangeError as e:
				self._logger.debug(f"Press outside projection, no drag: {e}")
				return self._state
			new_state = Dragging(target_id, Vec2(lng, lat), Vec2(*overlay.offset), overlay.rotation)

		self.map_adapter.set_default_panning_enabled(False)
		self._set_state(new_state)
		return new_state

	def _switch_to_rotating(self, state, event):
		# Only what the drag already committed stays; an uncommitted preview is dropped
		self._discard_preview()
		overlay = self.registry.get_overlay(state.overlay_id)
		angle = self._two_point_angle(event)
		new_state = Rotating(state.overlay_id, angle, overlay.rotation, angle)
		self._last_move = None
		self._set_state(new_state)
		return new_state

	def _finish(self, commit):
		overlay_id = self._state.overlay_id
		self.edge_panner.stop()
		if commit:
			self._commit_preview()
		else:
			self._discard_preview()
		self._last_move = None
		self.map_adapter.set_default_panning_enabled(True)
		self._set_state(Idle())
		self.gestureEnded.emit(overlay_id)

	def _set_state(self, state):
		self._logger.debug(f"Gesture state -> {state}")
		self._state = state
		self.stateChanged.emit(state)

	# ========================================
	# Tracking
	# ========================================

	def _track(self, event):
		state = self._state
		if isinstance(state, Dragging):
			self._drag_to(state, event)
		elif isinstance(state, Rotating):
			self._rotate_to(state, event)

	def _drag_to(self, state, event):
		try:
			lng, lat = self.map_adapter.screen_to_geo(*event.primary)
		except OutOfProjectionRangeError as e:
			self._logger.debug(f"Dropping move outside projection: {e}")
			return
		offset = state.start_offset + (Vec2(lng, lat) - state.start_geo)
		self._transform(state.overlay_id, offset.to_list(), state.start_rotation)

	def _rotate_to(self, state, event):
		if state.pivot_geo is not None:
			raw = self._pivot_angle(state.pivot_geo, event)
		elif event.point_count >= 2:
			raw = self._two_point_angle(event)
		else:
			return

		if self.settings.unwrap_rotation:
			current = unwrap_angle(state.last_angle, raw)
		else:
			current = raw
		rotation = state.start_rotation + (current - state.start_angle)

		overlay = self.registry.get_overlay(state.overlay_id)
		self._transform(state.overlay_id, overlay.offset, rotation)
		self._state = replace(state, last_angle=current)

	def _transform(self, overlay_id, offset, rotation):
		if self.live_commit:
			self.registry.apply_transform(overlay_id, offset, rotation)
			return
		fields = self.registry.compute_transform(overlay_id, offset, rotation)
		self._preview = PreviewTransform.from_fields(overlay_id, fields)
		self.previewChanged.emit(self._preview)

	def _on_edge_panned(self, dx, dy):
		# The map moved under a stationary pointer; follow it
		if is_active(self._state) and self._last_move is not None:
			self._track(self._last_move)

	# ========================================
	# Preview
	# ========================================

	def _commit_preview(self):
		preview = self._preview
		if preview is None:
			return
		self._preview = None
		if preview.overlay_id in self.registry:
			self.registry.update_overlay(preview.overlay_id, **preview.as_fields())
		self.previewChanged.emit(None)

	def _discard_preview(self):
		if self._preview is not None:
			self._logger.debug(f"Discarding preview for {self._preview.overlay_id}")
			self._preview = None
			self.previewChanged.emit(None)

	# ========================================
	# Angles
	# ========================================

	def _two_point_angle(self, event):
		(x1, y1), (x2, y2) = event.points[0], event.points[1]
		return screen_angle(x1, y1, x2, y2)

	def _pivot_angle(self, pivot_geo, event):
		pivot_x, pivot_y = self.map_adapter.geo_to_screen(pivot_geo.x, pivot_geo.y)
		x, y = event.primary
		return screen_angle(pivot_x, pivot_y, x, y)
