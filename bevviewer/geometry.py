"""Coordinate conversions between metres and window pixels."""

from __future__ import annotations

import math

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
WINDOW_HALF_W = WINDOW_WIDTH // 2
WINDOW_HALF_H = WINDOW_HEIGHT // 2

AXIS_X_RANGE_M = 100.0
AXIS_Y_RANGE_M = 200.0

DET_RADIUS = 3


def frames_to_ms(frames: int, fps: int) -> float:
    """Duration in milliseconds of ``frames`` frames at ``fps``."""
    return frames / fps * 1000.0


def rotate_xy(x: float, y: float, angle_rad: float) -> tuple[float, float]:
    """Rotate the point (x, y) about the origin by ``angle_rad``."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def xy_to_pixel(x: float, y: float) -> tuple[int, int]:
    """Convert metres to pixel coordinates, truncating toward zero."""
    return (
        int(x * WINDOW_WIDTH / AXIS_X_RANGE_M + WINDOW_HALF_W),
        int(y * WINDOW_HEIGHT / AXIS_Y_RANGE_M + WINDOW_HALF_H),
    )


def wl_to_pixel(w: float, l: float) -> tuple[float, float]:
    """Convert a width and length in metres to pixels.

    Both use the horizontal scale so that shapes keep their aspect ratio.
    """
    scale = WINDOW_WIDTH / AXIS_X_RANGE_M
    return w * scale, l * scale


def pixel_to_xy(x_pixel: int, y_pixel: int) -> tuple[float, float]:
    """Convert pixel coordinates back to metres."""
    return (
        (x_pixel - WINDOW_HALF_W) * AXIS_X_RANGE_M / WINDOW_WIDTH,
        (y_pixel - WINDOW_HALF_H) * AXIS_Y_RANGE_M / WINDOW_HEIGHT,
    )


def top_left_rotated_around_center(
    x: float, y: float, w: float, l: float, angle_rad: float
) -> tuple[float, float]:
    """Top-left corner of a w-by-l rectangle at (x, y) once rotated about its centre."""
    cx = x + w / 2
    cy = y + l / 2
    wr, lr = rotate_xy(w, l, angle_rad)
    return cx - wr / 2, cy - lr / 2