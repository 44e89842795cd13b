import pytest

from hello_face.preview import PreviewState, clamp_01, ease_out_quad, lerp
from hello_face.streaming import CaptureFrame, FaceBox

WIDTH = 640
HEIGHT = 480
RED = bytes((255, 0, 0))
GREEN = bytes((0, 255, 0))


def make_frame(frame_number=0, total_frames=30, face_box=None, detected=True):
    return CaptureFrame(
        frame_number=frame_number,
        total_frames=total_frames,
        frame_data=RED * (WIDTH * HEIGHT),
        width=WIDTH,
        height=HEIGHT,
        face_detected=detected,
        face_box=face_box,
        quality_score=0.9,
        timestamp_ms=1000,
    )


def pixel(data, x, y):
    idx = (y * WIDTH + x) * 3
    return bytes(data[idx : idx + 3])


def test_preview_state_creation():
    state = PreviewState()
    assert state.width == 640
    assert state.height == 480
    assert state.current_frame is None


def test_progress_percent_empty():
    assert PreviewState().progress_percent() == 0.0


def test_progress_text_format():
    assert PreviewState().progress_text() == "0/0 frames"


def test_detection_status():
    assert "En attente" in PreviewState().detection_status()


def test_get_display_data_without_frame():
    assert PreviewState().get_display_data() is None


def test_get_display_data_with_frame():
    state = PreviewState()
    box = FaceBox(x=100, y=100, width=50, height=50, confidence=0.95)
    state.update_frame(make_frame(face_box=box))
    data = state.get_display_data()
    assert len(data) == 640 * 480 * 3


def test_display_data_draws_green_border():
    state = PreviewState()
    box = FaceBox(x=100, y=100, width=50, height=50, confidence=0.95)
    state.update_frame(make_frame(face_box=box))
    data = state.get_display_data()
    assert pixel(data, 100, 100) == GREEN
    assert pixel(data, 149, 101) == GREEN
    assert pixel(data, 100, 149) == GREEN
    assert pixel(data, 149, 149) == GREEN
    assert pixel(data, 125, 125) == RED
    assert pixel(data, 99, 100) == RED
    assert pixel(data, 150, 100) == RED


def test_display_data_does_not_modify_frame():
    state = PreviewState()
    box = FaceBox(x=0, y=0, width=10, height=10, confidence=0.95)
    state.update_frame(make_frame(face_box=box))
    state.get_display_data()
    assert pixel(state.current_frame.frame_data, 0, 0) == RED


def test_box_past_right_edge_is_clipped():
    state = PreviewState()
    box = FaceBox(x=630, y=0, width=50, height=10, confidence=0.95)
    state.update_frame(make_frame(face_box=box))
    data = state.get_display_data()
    assert pixel(data, 639, 5) == GREEN
    assert pixel(data, 0, 1) == RED


def test_update_frame_sets_dimensions():
    state = PreviewState()
    frame = make_frame()
    frame.width, frame.height = 320, 240
    state.update_frame(frame)
    assert (state.width, state.height) == (320, 240)


def test_progress_values():
    state = PreviewState()
    state.update_frame(make_frame(frame_number=9, total_frames=30))
    assert state.progress_text() == "10/30 frames"
    assert state.progress_percent() == pytest.approx(1 / 3)


def test_progress_zero_total():
    state = PreviewState()
    state.update_frame(make_frame(frame_number=0, total_frames=0))
    assert state.progress_percent() == 0.0


def test_capture_progress_reaches_one():
    state = PreviewState()
    for i in range(30):
        state.update_frame(make_frame(frame_number=i, total_frames=30))
    assert state.progress_percent() == 1.0
    assert state.progress_text() == "30/30 frames"


def test_detection_status_with_face():
    state = PreviewState()
    box = FaceBox(x=0, y=0, width=10, height=10, confidence=0.95)
    state.update_frame(make_frame(face_box=box))
    assert state.detection_status() == "✓ Visage détecté (confiance: 95.0%)"


def test_detection_status_detected_without_box():
    state = PreviewState()
    state.update_frame(make_frame(face_box=None, detected=True))
    assert state.detection_status() == "✓ Visage détecté (confiance: 0.0%)"


def test_detection_status_no_face():
    state = PreviewState()
    state.update_frame(make_frame(detected=False))
    assert state.detection_status() == "⚠ Aucun visage détecté"


def test_lerp_interpolation():
    assert abs(lerp(0.0, 1.0, 0.5) - 0.5) < 0.01


def test_lerp_at_target():
    assert abs(lerp(0.5, 0.5, 0.1) - 0.5) < 0.01


def test_lerp_snaps_when_close():
    assert lerp(0.9995, 1.0, 0.1) == 1.0


def test_ease_out_quad():
    assert abs(ease_out_quad(0.5) - 0.75) < 0.01


def test_clamp_01_bounds():
    assert clamp_01(0.5) == 0.5
    assert clamp_01(-0.1) == 0.0
    assert clamp_01(1.5) == 1.0


def test_animation_bounds():
    value = clamp_01(0.0 + 2.0)
    assert value == 1.0
    assert clamp_01(value - 3.0) == 0.0


def animate(duration_ms, ticks, tick_ms=16.0):
    progress = 0.0
    history = []
    speed = min(tick_ms / duration_ms, 1.0) * 0.1
    for _ in range(ticks):
        progress = clamp_01(lerp(progress, 1.0, speed))
        history.append(progress)
    return history


def test_animation_interpolation_with_timing():
    history = animate(300.0, 5)
    assert 0.0 < history[-1] < 1.0


def test_animation_duration_limit():
    history = animate(100.0, 500)
    assert history[50] > 0.4
    assert history[-1] > 0.5


def test_animation_target_convergence():
    history = animate(300.0, 200)
    assert history[99] > 0.01
    assert history[-1] > 0.5
    assert all(a <= b for a, b in zip(history, history[1:]))