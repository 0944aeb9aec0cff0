"""Rendering of the bird's-eye view: axes, detections, tracks and overlays."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from functools import lru_cache

import pygame

from bevviewer.geometry import (
    DET_RADIUS,
    WINDOW_HALF_H,
    WINDOW_HALF_W,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    pixel_to_xy,
    rotate_xy,
    top_left_rotated_around_center,
    wl_to_pixel,
    xy_to_pixel,
)
from bevviewer.model import Detection, State, Track

Color = tuple[int, int, int, int]

INFO_Y_SPACING = 25
INFO_FONT_SIZE = 16
TICK_FONT_SIZE = 11
N_TICKS = 10

BG_COLOR: Color = (29, 22, 22, 255)
AXIS_COLOR: Color = (238, 238, 238, 125)
FONT_COLOR: Color = (238, 238, 238, 255)
TOOLTIP_FONT_COLOR: Color = BG_COLOR
BAD_DET_COLOR: Color = (216, 64, 64, 255)
GOOD_DET_COLOR: Color = (0, 228, 48, 255)
TRACK_COLOR: Color = (255, 203, 0, 180)
TOOLTIP_BG_COLOR: Color = (50, 50, 50, 150)
TOOLTIP_SIZE = (110, 90)


def axis_tick_labels() -> list[tuple[str, tuple[int, int]]]:
    """Text and position of every axis tick label.

    The vertical axis skips its label near zero so that the origin is
    labelled only once.
    """
    labels: list[tuple[str, tuple[int, int]]] = []
    for tick in range(N_TICKS):
        x_pos = tick * WINDOW_WIDTH // N_TICKS
        y_pos = tick * WINDOW_HEIGHT // N_TICKS
        x_value, y_value = pixel_to_xy(x_pos, y_pos)
        labels.append((f"{x_value:.1f}", (x_pos - 6, WINDOW_HALF_H + 5)))
        if abs(y_value) > 1.0:
            labels.append((f"{y_value:.1f}", (WINDOW_HALF_W + 5, y_pos - 6)))
    return labels


def info_lines(state: State) -> list[str]:
    """Lines of the frame counter and key help shown in the top-left corner."""
    lines = [f"FRAME: {state.current_frame}"]
    if state.show_commands:
        lines += [
            "H: HIDE COMMANDS",
            "A/D: +/- 1 FRAME",
            "Q/W: +/- 10 FRAMES",
            "R: RESET VIEW",
            "RIGHT CLIK: ZOOM",
        ]
    else:
        lines.append("H: SHOW COMMANDS")
    return lines


def detection_tooltip_lines(detection: Detection) -> list[str]:
    return [
        f"x: {detection.pos_x:.1f} m",
        f"y: {detection.pos_y:.1f} m",
        f"v: {detection.doppler:.1f} m/s",
    ]


def track_tooltip_lines(track: Track) -> list[str]:
    return [
        f"x: {track.pos_x:.1f} m",
        f"y: {track.pos_y:.1f} m",
        f"h: {math.degrees(track.heading_rad):.1f} deg",
    ]


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface, text: str, pos: tuple[float, float], size: int, color: Color
) -> None:
    rendered = _font(size).render(text, True, color[:3])
    if color[3] < 255:
        rendered.set_alpha(color[3])
    surface.blit(rendered, (round(pos[0]), round(pos[1])))


@contextmanager
def _overlay(surface: pygame.Surface) -> Iterator[pygame.Surface]:
    """Yield a transparent layer that is blended onto ``surface`` afterwards."""
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    yield layer
    surface.blit(layer, (0, 0))


def draw_detections(
    surface: pygame.Surface, detections: Sequence[Detection], hover: bool, selected_index: int
) -> None:
    """Draw detections as dots, enlarging the hovered one."""
    for index, detection in enumerate(detections):
        color = GOOD_DET_COLOR if detection.quality == 1 else BAD_DET_COLOR
        radius = DET_RADIUS + 3 if hover and index == selected_index else DET_RADIUS
        center = xy_to_pixel(detection.pos_x, detection.pos_y)
        pygame.draw.circle(surface, color, center, radius)


def _track_corners(track: Track, grow: bool) -> list[tuple[float, float]]:
    w = track.width + (1 if grow else 0)
    l = track.length + (3 if grow else 0)
    xp, yp = xy_to_pixel(track.pos_x - w / 2, track.pos_y - l / 2)
    wp, lp = wl_to_pixel(w, l)
    left, top = top_left_rotated_around_center(xp, yp, wp, lp, track.heading_rad)
    corners = []
    for dx, dy in ((0.0, 0.0), (wp, 0.0), (wp, lp), (0.0, lp)):
        rx, ry = rotate_xy(dx, dy, track.heading_rad)
        corners.append((left + rx, top + ry))
    return corners


def draw_tracks(
    surface: pygame.Surface, tracks: Sequence[Track], hover: bool, selected_index: int
) -> None:
    """Draw tracks as translucent rectangles oriented by their heading."""
    with _overlay(surface) as layer:
        for index, track in enumerate(tracks):
            grow = hover and index == selected_index
            pygame.draw.polygon(layer, TRACK_COLOR, _track_corners(track, grow))


def draw_axis(surface: pygame.Surface) -> None:
    """Draw both axes through the window centre with ticks and labels."""
    with _overlay(surface) as layer:
        pygame.draw.line(layer, AXIS_COLOR, (WINDOW_HALF_W, 0), (WINDOW_HALF_W, WINDOW_HEIGHT))
        pygame.draw.line(layer, AXIS_COLOR, (0, WINDOW_HALF_H), (WINDOW_WIDTH, WINDOW_HALF_H))
        for tick in range(N_TICKS):
            x_pos = tick * WINDOW_WIDTH // N_TICKS
            y_pos = tick * WINDOW_HEIGHT // N_TICKS
            pygame.draw.line(
                layer, AXIS_COLOR, (x_pos, WINDOW_HALF_H - 4), (x_pos, WINDOW_HALF_H + 4)
            )
            pygame.draw.line(
                layer, AXIS_COLOR, (WINDOW_HALF_W - 4, y_pos), (WINDOW_HALF_W + 4, y_pos)
            )
    for text, pos in axis_tick_labels():
        _draw_text(surface, text, pos, TICK_FONT_SIZE, AXIS_COLOR)


def draw_info_text(surface: pygame.Surface, state: State) -> None:
    for index, line in enumerate(info_lines(state)):
        _draw_text(surface, line, (5, 10 + index * INFO_Y_SPACING), INFO_FONT_SIZE, FONT_COLOR)


def _draw_tooltip(surface: pygame.Surface, lines: list[str], x: float, y: float) -> None:
    box = pygame.Surface(TOOLTIP_SIZE, pygame.SRCALPHA)
    box.fill(TOOLTIP_BG_COLOR)
    surface.blit(box, (round(x), round(y)))
    for index, line in enumerate(lines):
        _draw_text(
            surface, line, (x + 10, y + 10 + index * INFO_Y_SPACING), INFO_FONT_SIZE, FONT_COLOR
        )


def draw_tooltip_detection(surface: pygame.Surface, detection: Detection, x: float, y: float) -> None:
    _draw_tooltip(surface, detection_tooltip_lines(detection), x, y)


def draw_tooltip_track(surface: pygame.Surface, track: Track, x: float, y: float) -> None:
    _draw_tooltip(surface, track_tooltip_lines(track), x, y)