"""
Tests for the gesture controller state machine.

Covers:
- Idle -> Dragging / Rotating eligibility (selected + edit-enabled, primary button)
- Drag math against the fixed start snapshot, Mercator scale while dragging
- Two-contact and Shift+pointer rotation, angle unwrapping
- Dragging -> Rotating switch without discontinuity
- Exclusivity between overlays
- Release, partial release, cancel, removal of the locked overlay
- 'on_release' commit mode (preview transforms)
- Default map panning toggled around gestures
- Double activation
"""
import math

import pytest

from components.gesture import Dragging, Idle, PointerEvent, Rotating
from components.gesture_controller import GestureController
from constants import COMMIT_MODE_ON_RELEASE
from services.settings import Settings
from utils.geo_utils import rotate_coordinates

from conftest import make_square


def touch(*points, target=None):
    return PointerEvent.touch(*points, target_id=target)


def mouse(x, y, target=None, **kwargs):
    return PointerEvent.mouse(x, y, target_id=target, **kwargs)


def centroid_on_screen(registry, map_adapter, overlay_id):
    lng, lat = registry.get_overlay(overlay_id).centroid
    return map_adapter.geo_to_screen(lng, lat)


def assert_geometry_close(actual, expected, tol=1e-9):
    for ring, expected_ring in zip(actual, expected):
        assert len(ring) == len(expected_ring)
        for point, expected_point in zip(ring, expected_ring):
            assert point[0] == pytest.approx(expected_point[0], abs=tol)
            assert point[1] == pytest.approx(expected_point[1], abs=tol)


# ══════════════════════════════════════════════════════════════════════════
# Press eligibility
# ══════════════════════════════════════════════════════════════════════════

class TestPress:

    def test_starts_idle(self, controller):
        assert controller.state == Idle()
        assert controller.locked_overlay_id is None

    def test_press_on_editable_overlay_starts_drag(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        state = controller.press(mouse(x, y, editable_overlay))
        assert isinstance(state, Dragging)
        assert state.overlay_id == editable_overlay
        assert tuple(state.start_offset) == (0.0, 0.0)
        assert state.start_geo.x == pytest.approx(0.0, abs=1e-9)
        assert state.start_geo.y == pytest.approx(0.0, abs=1e-9)
        assert controller.state is state

    def test_press_without_edit_mode_is_ignored(self, controller, registry, map_adapter, equator_feature):
        overlay_id = registry.add_overlay(equator_feature)
        x, y = centroid_on_screen(registry, map_adapter, overlay_id)
        assert controller.press(mouse(x, y, overlay_id)) == Idle()

    def test_press_on_unselected_overlay_is_ignored(self, controller, registry, map_adapter,
                                                    editable_overlay, london_feature):
        registry.add_overlay(london_feature)  # takes the selection
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        assert controller.press(mouse(x, y, editable_overlay)) == Idle()

    def test_press_on_empty_map_is_ignored(self, controller, editable_overlay):
        assert controller.press(mouse(10, 10, None)) == Idle()

    def test_press_with_unknown_id_is_ignored(self, controller):
        assert controller.press(mouse(10, 10, 'ghost')) == Idle()

    def test_secondary_button_is_ignored(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        assert controller.press(mouse(x, y, editable_overlay, button='secondary')) == Idle()

    def test_single_touch_starts_drag(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        assert isinstance(controller.press(touch((x, y), target=editable_overlay)), Dragging)

    def test_two_contacts_start_rotation(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        state = controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        assert isinstance(state, Rotating)
        assert state.start_angle == pytest.approx(0.0)
        assert state.start_rotation == 0.0
        assert state.pivot_geo is None

    def test_shift_press_starts_pivot_rotation(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        state = controller.press(mouse(x + 100, y, editable_overlay, modifiers={'shift'}))
        assert isinstance(state, Rotating)
        assert tuple(state.pivot_geo) == pytest.approx((0.0, 0.0))

    def test_gesture_disables_default_panning(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        assert map_adapter.default_panning_enabled is False
        controller.release()
        assert map_adapter.default_panning_enabled is True

    def test_state_changed_signal(self, qtbot, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        with qtbot.waitSignal(controller.stateChanged, timeout=1000) as blocker:
            controller.press(mouse(x, y, editable_overlay))
        assert isinstance(blocker.args[0], Dragging)


# ══════════════════════════════════════════════════════════════════════════
# Dragging
# ══════════════════════════════════════════════════════════════════════════

class TestDragging:

    def test_drag_moves_by_geographic_delta(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        controller.move(mouse(x + 40, y - 30))
        start_lng, start_lat = map_adapter.screen_to_geo(x, y)
        now_lng, now_lat = map_adapter.screen_to_geo(x + 40, y - 30)
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.offset == pytest.approx([now_lng - start_lng, now_lat - start_lat], abs=1e-9)

    def test_drag_equator_to_sixty_reports_double_scale(self, controller, registry, map_adapter, editable_overlay):
        x0, y0 = map_adapter.geo_to_screen(0.0, 0.0)
        x1, y1 = map_adapter.geo_to_screen(0.0, 60.0)
        controller.press(mouse(x0, y0, editable_overlay))
        controller.move(mouse(x1, y1))
        controller.release()
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.offset == pytest.approx([0.0, 60.0], abs=1e-6)
        assert overlay.mercator_scale == pytest.approx(2.0, abs=1e-3)
        assert controller.state == Idle()

    def test_moves_measured_from_start_not_previous(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        for step in range(1, 30):
            controller.move(mouse(x + step, y - step))
        controller.move(mouse(x, y))
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.offset == pytest.approx([0.0, 0.0], abs=1e-9)
        assert_geometry_close(overlay.geometry, make_square(0.0, 0.0))

    def test_drag_keeps_rotation(self, controller, registry, map_adapter, editable_overlay):
        registry.apply_transform(editable_overlay, [0.0, 0.0], 0.7)
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        controller.move(mouse(x + 25, y))
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(0.7)

    def test_move_outside_projection_is_dropped(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        controller.move(mouse(x + 20, y))
        offset = list(registry.get_overlay(editable_overlay).offset)
        state = controller.move(mouse(x, -5000))
        assert isinstance(state, Dragging)
        assert registry.get_overlay(editable_overlay).offset == offset
        controller.move(mouse(x, y))
        assert registry.get_overlay(editable_overlay).offset == pytest.approx([0.0, 0.0], abs=1e-9)

    def test_move_while_idle_is_noop(self, controller, registry, editable_overlay):
        assert controller.move(mouse(100, 100)) == Idle()
        assert registry.get_overlay(editable_overlay).offset == [0.0, 0.0]


# ══════════════════════════════════════════════════════════════════════════
# Rotating
# ══════════════════════════════════════════════════════════════════════════

class TestRotating:

    def test_two_contact_quarter_turn(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        # Counter-clockwise on screen: the right contact moves up
        controller.move(touch((x, y + 50), (x, y - 50)))
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.rotation == pytest.approx(math.pi / 2)
        assert overlay.offset == [0.0, 0.0]

    def test_rotation_continues_from_current(self, controller, registry, map_adapter, editable_overlay):
        registry.apply_transform(editable_overlay, [0.0, 0.0], 0.5)
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        controller.move(touch((x, y + 50), (x, y - 50)))
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(0.5 + math.pi / 2)

    def test_shift_pointer_rotates_about_centroid(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x + 100, y, editable_overlay, modifiers={'shift'}))
        controller.move(mouse(x, y - 100))
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.rotation == pytest.approx(math.pi / 2)
        assert overlay.centroid == pytest.approx([0.0, 0.0], abs=1e-9)

    def test_unwrap_across_branch_cut(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x, y), (x - 100, y - 1), target=editable_overlay))
        controller.move(touch((x, y), (x - 100, y + 1)))
        rotation = registry.get_overlay(editable_overlay).rotation
        assert rotation == pytest.approx(2 * math.atan2(1, 100), abs=1e-9)

    def test_raw_angles_without_unwrap(self, qapp, registry, map_adapter, editable_overlay):
        controller = GestureController(registry, map_adapter, Settings(unwrap_rotation=False))
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x, y), (x - 100, y - 1), target=editable_overlay))
        controller.move(touch((x, y), (x - 100, y + 1)))
        rotation = registry.get_overlay(editable_overlay).rotation
        assert rotation == pytest.approx(2 * math.atan2(1, 100) - 2 * math.pi, abs=1e-9)

    def test_unwrap_tracks_full_turn(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x, y), (x + 100, y), target=editable_overlay))
        for step in range(1, 37):
            angle = step * math.pi / 18
            controller.move(touch((x, y), (x + 100 * math.cos(angle), y - 100 * math.sin(angle))))
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(2 * math.pi, abs=1e-9)

    def test_single_contact_move_keeps_rotation(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        controller.move(touch((x, y + 50), (x, y - 50)))
        controller.move(touch((x + 300, y)))
        assert isinstance(controller.state, Rotating)
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(math.pi / 2)

    def test_end_to_end_quarter_turn(self, controller, registry, map_adapter, london_feature):
        overlay_id = registry.add_overlay(london_feature)
        registry.set_edit_enabled(overlay_id, True)
        assert registry.get_overlay(overlay_id).original_centroid == pytest.approx((0.0, 51.5))

        x, y = centroid_on_screen(registry, map_adapter, overlay_id)
        controller.press(touch((x - 60, y), (x + 60, y), target=overlay_id))
        controller.move(touch((x, y + 60), (x, y - 60)))
        controller.release()

        overlay = registry.get_overlay(overlay_id)
        assert controller.state == Idle()
        assert overlay.offset == [0.0, 0.0]
        assert overlay.rotation == pytest.approx(math.pi / 2)
        expected = rotate_coordinates(make_square(0.0, 51.5), 0.0, 51.5, math.pi / 2)
        assert_geometry_close(overlay.geometry, expected)
        # (1, 50.5) turns a quarter counter-clockwise about (0, 51.5) to (1, 52.5)
        assert overlay.geometry[0][1] == pytest.approx([1.0, 52.5])


# ══════════════════════════════════════════════════════════════════════════
# Dragging -> Rotating
# ══════════════════════════════════════════════════════════════════════════

class TestDragToRotate:

    def _drag(self, controller, registry, map_adapter, overlay_id):
        x, y = centroid_on_screen(registry, map_adapter, overlay_id)
        controller.press(touch((x, y), target=overlay_id))
        controller.move(touch((x + 60, y - 40)))
        return x + 60, y - 40

    def test_second_contact_switches_to_rotation(self, controller, registry, map_adapter, editable_overlay):
        x, y = self._drag(controller, registry, map_adapter, editable_overlay)
        state = controller.press(touch((x, y), (x + 80, y), target=editable_overlay))
        assert isinstance(state, Rotating)
        assert state.overlay_id == editable_overlay

    def test_switch_keeps_committed_offset(self, controller, registry, map_adapter, editable_overlay):
        x, y = self._drag(controller, registry, map_adapter, editable_overlay)
        offset = list(registry.get_overlay(editable_overlay).offset)
        geometry = registry.get_overlay(editable_overlay).geometry
        controller.press(touch((x, y), (x + 80, y), target=editable_overlay))
        # Same contacts: no jump
        controller.move(touch((x, y), (x + 80, y)))
        overlay = registry.get_overlay(editable_overlay)
        assert overlay.offset == pytest.approx(offset)
        assert overlay.rotation == pytest.approx(0.0)
        assert_geometry_close(overlay.geometry, geometry)

    def test_rotation_baseline_is_current_rotation(self, controller, registry, map_adapter, editable_overlay):
        registry.apply_transform(editable_overlay, [0.0, 0.0], 0.3)
        x, y = self._drag(controller, registry, map_adapter, editable_overlay)
        state = controller.press(touch((x, y), (x + 80, y), target=editable_overlay))
        assert state.start_rotation == pytest.approx(0.3)
        controller.move(touch((x, y), (x, y - 80)))
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(0.3 + math.pi / 2)

    def test_partial_release_keeps_rotating(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        state = controller.release(touch((x - 50, y)))
        assert isinstance(state, Rotating)
        assert controller.release() == Idle()


# ══════════════════════════════════════════════════════════════════════════
# Exclusivity
# ══════════════════════════════════════════════════════════════════════════

class TestExclusivity:

    @pytest.fixture
    def two_overlays(self, registry, london_feature, editable_overlay):
        other = registry.add_overlay(london_feature)
        registry.set_edit_enabled(other, True)
        registry.select_overlay(editable_overlay)
        return editable_overlay, other

    def test_other_overlay_press_ignored_while_dragging(self, controller, registry, map_adapter, two_overlays):
        locked, other = two_overlays
        x, y = centroid_on_screen(registry, map_adapter, locked)
        controller.press(mouse(x, y, locked))
        ox, oy = centroid_on_screen(registry, map_adapter, other)
        state = controller.press(mouse(ox, oy, other))
        assert state.overlay_id == locked

    def test_second_contact_on_other_overlay_ignored(self, controller, registry, map_adapter, two_overlays):
        locked, other = two_overlays
        x, y = centroid_on_screen(registry, map_adapter, locked)
        controller.press(touch((x, y), target=locked))
        state = controller.press(touch((x, y), (x + 50, y), target=other))
        assert isinstance(state, Dragging)
        assert state.overlay_id == locked

    def test_moves_only_affect_locked_overlay(self, controller, registry, map_adapter, two_overlays):
        locked, other = two_overlays
        before = registry.get_overlay(other).geometry
        x, y = centroid_on_screen(registry, map_adapter, locked)
        controller.press(mouse(x, y, locked))
        controller.move(mouse(x + 30, y + 30))
        controller.release()
        assert registry.get_overlay(other).geometry == before
        assert registry.get_overlay(other).offset == [0.0, 0.0]
        assert registry.get_overlay(locked).offset != [0.0, 0.0]

    def test_press_while_rotating_ignored(self, controller, registry, map_adapter, two_overlays):
        locked, other = two_overlays
        x, y = centroid_on_screen(registry, map_adapter, locked)
        controller.press(touch((x - 50, y), (x + 50, y), target=locked))
        state = controller.press(touch((x - 50, y), (x + 50, y), (x, y + 50), target=other))
        assert isinstance(state, Rotating)
        assert state.overlay_id == locked


# ══════════════════════════════════════════════════════════════════════════
# Ending gestures
# ══════════════════════════════════════════════════════════════════════════

class TestEnding:

    def test_release_emits_gesture_ended(self, qtbot, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        with qtbot.waitSignal(controller.gestureEnded, timeout=1000) as blocker:
            controller.release()
        assert blocker.args == [editable_overlay]

    def test_release_while_idle_is_noop(self, controller):
        assert controller.release() == Idle()

    def test_cancel_returns_to_idle(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        assert controller.cancel() == Idle()
        assert map_adapter.default_panning_enabled is True

    def test_removing_locked_overlay_releases_lock(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        registry.remove_overlay(editable_overlay)
        assert controller.state == Idle()
        assert map_adapter.default_panning_enabled is True
        # Stray moves after removal do nothing
        assert controller.move(mouse(x + 10, y)) == Idle()

    def test_clear_all_releases_lock(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(touch((x - 50, y), (x + 50, y), target=editable_overlay))
        registry.clear_all()
        assert controller.state == Idle()
        assert not controller.edge_panner.is_active()

    def test_removing_other_overlay_keeps_lock(self, controller, registry, map_adapter,
                                               editable_overlay, london_feature):
        other = registry.add_overlay(london_feature)
        registry.select_overlay(editable_overlay)
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        registry.remove_overlay(other)
        assert isinstance(controller.state, Dragging)

    def test_new_gesture_after_release(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        controller.move(mouse(x + 20, y))
        controller.release()
        first_offset = list(registry.get_overlay(editable_overlay).offset)

        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        state = controller.press(mouse(x, y, editable_overlay))
        assert tuple(state.start_offset) == pytest.approx(tuple(first_offset))
        controller.move(mouse(x + 20, y))
        controller.release()
        assert registry.get_overlay(editable_overlay).offset[0] == pytest.approx(2 * first_offset[0], rel=1e-6)


# ══════════════════════════════════════════════════════════════════════════
# Commit on release
# ══════════════════════════════════════════════════════════════════════════

class TestCommitOnRelease:

    @pytest.fixture
    def deferred(self, qapp, registry, map_adapter):
        controller = GestureController(registry, map_adapter, Settings(commit_mode=COMMIT_MODE_ON_RELEASE))
        yield controller
        controller.edge_panner.stop()

    def test_moves_only_update_preview(self, deferred, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        deferred.press(mouse(x, y, editable_overlay))
        deferred.move(mouse(x + 50, y))
        assert registry.get_overlay(editable_overlay).offset == [0.0, 0.0]
        preview = deferred.preview
        assert preview.overlay_id == editable_overlay
        assert preview.offset[0] > 0

    def test_release_commits_preview(self, deferred, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        deferred.press(mouse(x, y, editable_overlay))
        deferred.move(mouse(x + 50, y))
        expected = list(deferred.preview.offset)
        deferred.release()
        assert deferred.preview is None
        assert registry.get_overlay(editable_overlay).offset == pytest.approx(expected)

    def test_cancel_discards_preview(self, qtbot, deferred, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        deferred.press(mouse(x, y, editable_overlay))
        deferred.move(mouse(x + 50, y))
        with qtbot.waitSignal(deferred.previewChanged, timeout=1000) as blocker:
            deferred.cancel()
        assert blocker.args == [None]
        assert registry.get_overlay(editable_overlay).offset == [0.0, 0.0]

    def test_removal_discards_preview(self, deferred, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        deferred.press(mouse(x, y, editable_overlay))
        deferred.move(mouse(x + 50, y))
        registry.remove_overlay(editable_overlay)
        assert deferred.preview is None
        assert deferred.state == Idle()

    def test_switch_to_rotation_drops_uncommitted_drag(self, qtbot, deferred, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        deferred.press(touch((x, y), target=editable_overlay))
        deferred.move(touch((x + 60, y - 40)))
        assert deferred.preview.offset[0] > 0
        with qtbot.waitSignal(deferred.previewChanged, timeout=1000) as blocker:
            deferred.press(touch((x + 60, y - 40), (x + 160, y - 40), target=editable_overlay))
        assert blocker.args == [None]
        assert deferred.preview is None
        assert isinstance(deferred.state, Rotating)
        assert registry.get_overlay(editable_overlay).offset == [0.0, 0.0]
        deferred.move(touch((x + 60, y - 40), (x + 60, y - 140)))
        assert tuple(deferred.preview.offset) == pytest.approx((0.0, 0.0))
        assert deferred.preview.rotation == pytest.approx(math.pi / 2)
        assert registry.get_overlay(editable_overlay).rotation == 0.0
        deferred.release()
        assert registry.get_overlay(editable_overlay).rotation == pytest.approx(math.pi / 2)
        assert registry.get_overlay(editable_overlay).offset == pytest.approx([0.0, 0.0])


# ══════════════════════════════════════════════════════════════════════════
# Double activation
# ══════════════════════════════════════════════════════════════════════════

class TestDoubleActivate:

    def test_toggles_edit_mode(self, controller, registry, equator_feature):
        overlay_id = registry.add_overlay(equator_feature)
        assert controller.double_activate(overlay_id) is True
        assert registry.is_edit_enabled(overlay_id)
        assert controller.double_activate(overlay_id) is False
        assert controller.state == Idle()

    def test_ignored_during_gesture(self, controller, registry, map_adapter, editable_overlay):
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        assert controller.double_activate(editable_overlay) is None
        assert registry.is_edit_enabled(editable_overlay)

    def test_ignored_for_other_overlay_during_gesture(self, controller, registry, map_adapter,
                                                      editable_overlay, london_feature):
        other = registry.add_overlay(london_feature)
        registry.select_overlay(editable_overlay)
        x, y = centroid_on_screen(registry, map_adapter, editable_overlay)
        controller.press(mouse(x, y, editable_overlay))
        assert controller.double_activate(other) is None
        assert not registry.is_edit_enabled(other)
        controller.release()
        assert controller.double_activate(other) is True

    def test_ignored_for_unknown_target(self, controller):
        assert controller.double_activate('ghost') is None
        assert controller.double_activate(None) is None
