import math

import pygame
import pytest

from bevviewer import draw
from bevviewer.geometry import WINDOW_HEIGHT, WINDOW_WIDTH, pixel_to_xy, xy_to_pixel
from bevviewer.model import Detection, State, Track


@pytest.fixture
def surface():
    canvas = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    canvas.fill((0, 0, 0))
    return canvas


def test_axis_labels_count_and_single_origin():
    labels = draw.axis_tick_labels()
    assert len(labels) == 19
    assert [text for text, _ in labels].count("0.0") == 1


def test_axis_labels_match_pixel_conversion():
    for text, (x, y) in draw.axis_tick_labels():
        if y == WINDOW_HEIGHT // 2 + 5:
            value = pixel_to_xy(x + 6, 0)[0]
        else:
            value = pixel_to_xy(0, y + 6)[1]
        assert float(text) == pytest.approx(value, abs=0.05)


def test_info_lines_hidden_commands():
    state = State(5, 20)
    assert draw.info_lines(state) == ["FRAME: 5", "H: SHOW COMMANDS"]


def test_info_lines_shown_commands():
    state = State(5, 20)
    state.toggle_show_commands()
    lines = draw.info_lines(state)
    assert len(lines) == 6
    assert lines[1] == "H: HIDE COMMANDS"
    assert "R: RESET VIEW" in lines


def test_detection_tooltip_lines():
    det = Detection(pos_x=12.3, pos_y=-4.5, doppler=2.5, quality=1)
    assert draw.detection_tooltip_lines(det) == ["x: 12.3 m", "y: -4.5 m", "v: 2.5 m/s"]


def test_track_tooltip_lines_in_degrees():
    trk = Track(pos_x=1.0, pos_y=2.0, heading_rad=math.pi)
    assert draw.track_tooltip_lines(trk)[2] == "h: 180.0 deg"
    assert draw.track_tooltip_lines(trk)[0] == "x: 1.0 m"


def test_draw_detections_colors(surface):
    dets = [Detection(0.0, 0.0, 0.0, 1), Detection(20.0, 0.0, 0.0, 0)]
    draw.draw_detections(surface, dets, False, 0)
    good = surface.get_at(xy_to_pixel(0.0, 0.0))
    bad = surface.get_at(xy_to_pixel(20.0, 0.0))
    assert tuple(good)[:3] == draw.GOOD_DET_COLOR[:3]
    assert tuple(bad)[:3] == draw.BAD_DET_COLOR[:3]


def test_draw_detections_hover_enlarges(surface):
    dets = [Detection(0.0, 0.0, 0.0, 1)]
    cx, cy = xy_to_pixel(0.0, 0.0)
    draw.draw_detections(surface, dets, False, 0)
    assert tuple(surface.get_at((cx + 5, cy)))[:3] == (0, 0, 0)
    draw.draw_detections(surface, dets, True, 0)
    assert tuple(surface.get_at((cx + 5, cy)))[:3] == draw.GOOD_DET_COLOR[:3]


def test_draw_tracks_fills_centre_only(surface):
    draw.draw_tracks(surface, [Track(pos_x=0.0, pos_y=0.0, width=2.0, length=4.0)], False, 0)
    centre = surface.get_at(xy_to_pixel(0.0, 0.0))
    assert centre.r > 0 and centre.g > 0
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_draw_axis_marks_centre_lines(surface):
    draw.draw_axis(surface)
    assert surface.get_at((WINDOW_WIDTH // 2, 50)).r > 0
    assert surface.get_at((50, WINDOW_HEIGHT // 2)).r > 0


def test_draw_tooltip_detection_box(surface):
    draw.draw_tooltip_detection(surface, Detection(1.0, 2.0, 3.0, 1), 10, 10)
    assert surface.get_at((12, 95)).r > 0
    assert tuple(surface.get_at((300, 300)))[:3] == (0, 0, 0)


def test_draw_tooltip_track_box(surface):
    draw.draw_tooltip_track(surface, Track(pos_x=1.0, pos_y=2.0), 100, 100)
    assert surface.get_at((102, 185)).r > 0
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)


def test_draw_info_text_paints_pixels(surface):
    draw.draw_info_text(surface, State(1, 3))
    area = surface.subsurface(pygame.Rect(0, 0, 200, 60))
    painted = sum(
        1
        for x in range(area.get_width())
        for y in range(area.get_height())
        if area.get_at((x, y)).r > 0
    )
    assert painted > 0