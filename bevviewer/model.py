"""Frame-indexed detections and tracks, and the viewer's navigation state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Detection:
    """A single radar detection in bird's-eye-view coordinates."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    doppler: float = 0.0
    quality: int = 0


@dataclass
class Track:
    """A tracked object, modelled as an oriented rectangle."""

    id: int = 0
    pos_x: float = 0.0
    pos_y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    heading_rad: float = 0.0
    width: float = 0.0
    length: float = 0.0


@dataclass
class Detections:
    """Detections grouped by frame, keyed in ascending frame order."""

    frames: dict[int, list[Detection]] = field(default_factory=dict)
    last_frame: int | None = None

    @property
    def first_frame(self) -> int | None:
        """The lowest frame number present, or None when empty."""
        return next(iter(self.frames), None)


@dataclass
class Tracks:
    """Tracks grouped by frame, keyed in ascending frame order."""

    frames: dict[int, list[Track]] = field(default_factory=dict)
    last_frame: int | None = None

    @property
    def first_frame(self) -> int | None:
        """The lowest frame number present, or None when empty."""
        return next(iter(self.frames), None)


@dataclass
class State:
    """Current frame, help visibility and hover selection of the viewer."""

    first_frame: int
    last_frame: int
    current_frame: int = field(init=False)
    show_commands: bool = False
    det_selected: bool = False
    det_sel_index: int = 0
    trk_selected: bool = False
    trk_sel_index: int = 0

    def __post_init__(self) -> None:
        self.current_frame = self.first_frame

    def slice_detections(self, detection_map: dict[int, list[Detection]]) -> list[Detection]:
        """Return a copy of the detections of the current frame.

        Raises KeyError when the current frame has no entry.
        """
        return list(detection_map[self.current_frame])

    def slice_tracks(self, track_map: dict[int, list[Track]]) -> list[Track]:
        """Return a copy of the tracks of the current frame.

        Raises KeyError when the current frame has no entry.
        """
        return list(track_map[self.current_frame])

    def toggle_show_commands(self) -> None:
        self.show_commands = not self.show_commands

    def increase_frames(self, value: int) -> None:
        """Advance by ``value`` frames, wrapping to the first frame past the end."""
        next_frame = self.current_frame + value
        self.current_frame = self.first_frame if next_frame > self.last_frame else next_frame

    def decrease_frames(self, value: int) -> None:
        """Step back by ``value`` frames, wrapping to the last frame before the start."""
        next_frame = self.current_frame - value
        self.current_frame = self.last_frame if next_frame < self.first_frame else next_frame