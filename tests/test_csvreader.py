import pytest

from bevviewer.csvreader import read_detections, read_tracks
from bevviewer.model import Detection, Track


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_detections_grouped_by_frame(tmp_path):
    path = _write(
        tmp_path,
        "dets.csv",
        "frame,x,y,doppler,quality\n"
        "1,1.5,2.5,-0.5,1\n"
        "1,3.0,4.0,0.25,0\n"
        "2,-7.0,8.0,1.0,1\n",
    )
    dets = read_detections(path)
    assert dets.frames == {
        1: [Detection(1.5, 2.5, -0.5, 1), Detection(3.0, 4.0, 0.25, 0)],
        2: [Detection(-7.0, 8.0, 1.0, 1)],
    }
    assert dets.last_frame == 2
    assert dets.first_frame == 1


def test_header_is_skipped(tmp_path):
    path = _write(tmp_path, "dets.csv", "9,9,9,9,9\n3,1,1,1,1\n")
    dets = read_detections(path)
    assert list(dets.frames) == [3]


def test_last_frame_is_frame_of_final_row(tmp_path):
    path = _write(tmp_path, "dets.csv", "h\n5,0,0,0,1\n2,0,0,0,1")
    dets = read_detections(path)
    assert dets.last_frame == 2
    assert list(dets.frames) == [2, 5]


def test_last_row_without_newline_read_once(tmp_path):
    path = _write(tmp_path, "dets.csv", "h\n4,1,2,3,1")
    dets = read_detections(path)
    assert dets.frames == {4: [Detection(1.0, 2.0, 3.0, 1)]}


def test_track_column_order(tmp_path):
    path = _write(
        tmp_path,
        "trks.csv",
        "frame,x,y,vx,vy,length,width,heading,id\n"
        "3,1.0,2.0,0.5,-0.5,4.5,1.8,0.25,17\n",
    )
    trks = read_tracks(path)
    assert trks.frames == {
        3: [
            Track(
                id=17,
                pos_x=1.0,
                pos_y=2.0,
                vel_x=0.5,
                vel_y=-0.5,
                heading_rad=0.25,
                width=1.8,
                length=4.5,
            )
        ]
    }
    assert trks.last_frame == 3


def test_empty_fields_shift_values_left(tmp_path):
    path = _write(tmp_path, "dets.csv", "h\n1,,2.0,3.0\n")
    dets = read_detections(path)
    assert dets.frames[1] == [Detection(2.0, 3.0, 0.0, 0)]


def test_lenient_number_parsing(tmp_path):
    path = _write(tmp_path, "dets.csv", "h\n2,abc,1.5m,2e1,1x\n")
    dets = read_detections(path)
    assert dets.frames[2] == [Detection(0.0, 1.5, 20.0, 1)]


def test_missing_columns_default_to_zero(tmp_path):
    path = _write(tmp_path, "trks.csv", "h\n6,1.0\n")
    trks = read_tracks(path)
    assert trks.frames[6] == [Track(pos_x=1.0)]


def test_header_only_file(tmp_path):
    path = _write(tmp_path, "trks.csv", "frame,x\n")
    trks = read_tracks(path)
    assert trks.frames == {}
    assert trks.last_frame is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_detections(tmp_path / "absent.csv")
    with pytest.raises(FileNotFoundError):
        read_tracks(tmp_path / "absent.csv")