# bevviewer

An interactive bird's-eye-view (BEV) viewer for radar detections and object
tracks. It reads two CSV files, groups their rows by frame, and lets you step
through the frames, zoom, pan and hover over objects to inspect them. The
window is drawn with pygame.

## Installation

```
pip install .
```

## Input files

Both files start with a header row, which is skipped. Columns are
comma-separated. Empty fields are dropped (so later values shift left), and
numbers are read leniently: the longest numeric prefix of a field counts, and
a field that is not a number reads as zero.

Detections:

```
frame,x,y,doppler,quality
```

A detection with `quality` equal to `1` is drawn green; anything else is drawn
in red.

Tracks:

```
frame,x,y,vx,vy,length,width,heading_rad,id
```

Tracks are drawn as translucent rectangles rotated by their heading.

Viewing starts at the lowest detection frame. The last frame is the frame of
the final row of the detections file, and stepping past it wraps around.
Frames beyond the final track row's frame show no tracks. Every frame between
the first and the last must have at least one detection row.

## Running

```
bevviewer [DETECTIONS] [TRACKS]
```

Without arguments the viewer reads `gen_dets.csv` and `gen_tracks.csv` from
the current directory. Run `bevviewer --help` for the usage summary.

## Controls

| Input              | Action                                    |
|--------------------|-------------------------------------------|
| `H`                | Show or hide the command list             |
| `D` / `A`          | Next / previous frame                     |
| `W` / `Q`          | Forward / back 10 frames                  |
| Hold a frame key   | Keep stepping after half a second         |
| Right click + drag | Zoom around the mouse position            |
| Left click + drag  | Pan (only while zoomed in)                |
| `R`                | Reset zoom and panning                    |
| Mouse hover        | Tooltip: position and doppler or heading  |
| `Esc` / close      | Quit                                      |

## Using the library

```python
from bevviewer.csvreader import read_detections, read_tracks
from bevviewer.model import State

dets = read_detections("gen_dets.csv")
trks = read_tracks("gen_tracks.csv")

state = State(dets.first_frame, dets.last_frame)
state.increase_frames(1)
for det in state.slice_detections(dets.frames):
    print(det.pos_x, det.pos_y, det.doppler)
```

- `bevviewer.model` holds the `Detection`, `Track`, `Detections`, `Tracks`
  and `State` dataclasses. `Detections.frames` and `Tracks.frames` map frame
  numbers, in ascending order, to lists of objects.
- `bevviewer.geometry` holds the conversions between metres and window pixels
  (`xy_to_pixel`, `pixel_to_xy`, `wl_to_pixel`) and the rotation helpers
  (`rotate_xy`, `top_left_rotated_around_center`).
- `bevviewer.draw` renders onto a pygame surface; `axis_tick_labels`,
  `info_lines`, `detection_tooltip_lines` and `track_tooltip_lines` return the
  text shown, without drawing.
- `bevviewer.app` holds `Camera2D`, the hover and frame-stepping logic
  (`update_hover`, `step_frames`), the `Viewer` window and `main`.