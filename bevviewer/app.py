"""Interactive viewer: camera, input handling and the main loop."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from bevviewer.csvreader import read_detections, read_tracks
from bevviewer.draw import (
    BG_COLOR,
    draw_axis,
    draw_detections,
    draw_info_text,
    draw_tooltip_detection,
    draw_tooltip_track,
    draw_tracks,
)
from bevviewer.geometry import (
    DET_RADIUS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    frames_to_ms,
    wl_to_pixel,
    xy_to_pixel,
)
from bevviewer.model import Detection, State, Track

FPS = 60
REPEAT_DELAY_MS = 500.0
MIN_ZOOM = 0.125
MAX_ZOOM = 64.0
ZOOM_SPEED = 0.005

Point = tuple[float, float]


@dataclass
class Camera2D:
    """A 2D camera: ``target`` in world space appears at ``offset`` on screen."""

    offset: Point = (0.0, 0.0)
    target: Point = (0.0, 0.0)
    zoom: float = 1.0

    def screen_to_world(self, point: Point) -> Point:
        return (
            (point[0] - self.offset[0]) / self.zoom + self.target[0],
            (point[1] - self.offset[1]) / self.zoom + self.target[1],
        )

    def world_to_screen(self, point: Point) -> Point:
        return (
            (point[0] - self.target[0]) * self.zoom + self.offset[0],
            (point[1] - self.target[1]) * self.zoom + self.offset[1],
        )

    def pan(self, delta: Point) -> None:
        """Drag the view by a mouse delta; only allowed while zoomed in."""
        if self.zoom > 1.0:
            self.target = (
                self.target[0] - delta[0] / self.zoom,
                self.target[1] - delta[1] / self.zoom,
            )

    def focus(self, mouse: Point) -> None:
        """Anchor zooming on the world point under the mouse."""
        self.target = self.screen_to_world(mouse)
        self.offset = (float(mouse[0]), float(mouse[1]))

    def zoom_by(self, delta_x: float) -> None:
        """Zoom logarithmically by a horizontal mouse movement."""
        if delta_x > 0.0 or self.zoom > 1.0:
            zoom = math.exp(math.log(self.zoom) + ZOOM_SPEED * delta_x)
            self.zoom = min(max(zoom, MIN_ZOOM), MAX_ZOOM)

    def reset(self) -> None:
        self.zoom = 1.0
        self.target = (0.0, 0.0)
        self.offset = (0.0, 0.0)


def update_hover(
    state: State, world_pos: Point, detections: Sequence[Detection], tracks: Sequence[Track]
) -> None:
    """Update the hover selection of ``state`` for a pointer at ``world_pos``.

    Tracks take priority; detections are checked only when no track is hit.
    """
    px, py = world_pos
    track_hit = False
    if tracks:
        for index, track in enumerate(tracks):
            x, y = xy_to_pixel(track.pos_x, track.pos_y)
            w, h = wl_to_pixel(track.width, track.length)
            track_hit = x <= px < x + w and y <= py < y + h
            if track_hit:
                state.trk_sel_index = index
                break
        state.trk_selected = track_hit

    if not track_hit and detections:
        det_hit = False
        for index, detection in enumerate(detections):
            x, y = xy_to_pixel(detection.pos_x, detection.pos_y)
            det_hit = (px - x) ** 2 + (py - y) ** 2 <= DET_RADIUS**2
            if det_hit:
                state.det_sel_index = index
                break
        state.det_selected = det_hit


def step_frames(state: State, pressed: bool, held: bool, delta: int, frame_counter: int) -> int:
    """Move ``delta`` frames on a key press, repeating while held.

    A negative ``delta`` moves backwards. Returns the updated frame counter,
    which restarts at zero on a fresh press.
    """
    move = state.increase_frames if delta > 0 else state.decrease_frames
    amount = abs(delta)
    if pressed:
        frame_counter = 0
        move(amount)
        state.det_selected = False
    if held and frames_to_ms(frame_counter, FPS) > REPEAT_DELAY_MS:
        move(amount)
    return frame_counter


_FRAME_KEYS = (
    (pygame.K_d, 1),
    (pygame.K_w, 10),
    (pygame.K_a, -1),
    (pygame.K_q, -10),
)


def _present(screen: pygame.Surface, world: pygame.Surface, camera: Camera2D) -> None:
    """Blit the visible part of ``world`` onto ``screen`` through ``camera``."""
    left, top = camera.screen_to_world((0.0, 0.0))
    width = screen.get_width() / camera.zoom
    height = screen.get_height() / camera.zoom
    source = pygame.Rect(
        math.floor(left), math.floor(top), math.ceil(width) + 1, math.ceil(height) + 1
    ).clip(world.get_rect())
    if source.width == 0 or source.height == 0:
        return
    size = (max(1, round(source.width * camera.zoom)), max(1, round(source.height * camera.zoom)))
    scaled = pygame.transform.scale(world.subsurface(source), size)
    dest = camera.world_to_screen(source.topleft)
    screen.blit(scaled, (round(dest[0]), round(dest[1])))


class Viewer:
    """Window that steps through the frames of a detection and track recording."""

    def __init__(
        self,
        detections_path: str | os.PathLike[str] = "gen_dets.csv",
        tracks_path: str | os.PathLike[str] = "gen_tracks.csv",
    ) -> None:
        self.detections = read_detections(detections_path)
        self.tracks = read_tracks(tracks_path)
        first = self.detections.first_frame
        if first is None or self.detections.last_frame is None:
            raise ValueError(f"no detections in {os.fspath(detections_path)}")
        self.state = State(first, self.detections.last_frame)

    def _current_frame(self) -> tuple[list[Detection], list[Track]]:
        detections = self.state.slice_detections(self.detections.frames)
        last = self.tracks.last_frame
        if last is not None and self.state.current_frame <= last:
            tracks = self.state.slice_tracks(self.tracks.frames)
        else:
            tracks = []
        return detections, tracks

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption("BEV Viewer")
            clock = pygame.time.Clock()
            world = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
            camera = Camera2D()
            state = self.state
            frame_counter = 0
            detections: list[Detection] = []
            tracks: list[Track] = []
            pygame.mouse.get_rel()

            running = True
            while running:
                frame_counter += 1
                pressed_keys: set[int] = set()
                right_pressed = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        pressed_keys.add(event.key)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                        right_pressed = True
                if not running:
                    break

                buttons = pygame.mouse.get_pressed()
                delta = pygame.mouse.get_rel()
                mouse = pygame.mouse.get_pos()
                if buttons[0]:
                    camera.pan(delta)
                if right_pressed:
                    camera.focus(mouse)
                if buttons[2]:
                    camera.zoom_by(delta[0])
                if pygame.K_r in pressed_keys:
                    camera.reset()

                update_hover(state, camera.screen_to_world(mouse), detections, tracks)

                if pygame.K_h in pressed_keys:
                    state.toggle_show_commands()

                held = pygame.key.get_pressed()
                for key, frame_delta in _FRAME_KEYS:
                    frame_counter = step_frames(
                        state, key in pressed_keys, bool(held[key]), frame_delta, frame_counter
                    )

                detections, tracks = self._current_frame()

                world.fill(BG_COLOR)
                draw_axis(world)
                draw_detections(world, detections, state.det_selected, state.det_sel_index)
                if tracks:
                    draw_tracks(world, tracks, state.trk_selected, state.trk_sel_index)

                screen.fill(BG_COLOR)
                _present(screen, world, camera)
                draw_info_text(screen, state)

                x0, y0 = mouse[0] + 5, mouse[1] + 5
                if state.trk_selected and state.trk_sel_index < len(tracks):
                    draw_tooltip_track(screen, tracks[state.trk_sel_index], x0, y0)
                if state.det_selected and state.det_sel_index < len(detections):
                    draw_tooltip_detection(screen, detections[state.det_sel_index], x0, y0)

                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bird's-eye view of detections and tracks.")
    parser.add_argument("detections", nargs="?", default="gen_dets.csv")
    parser.add_argument("tracks", nargs="?", default="gen_tracks.csv")
    args = parser.parse_args(argv)
    Viewer(args.detections, args.tracks).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())