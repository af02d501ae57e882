import pytest

from c14calib.cal_curve import HEADER_LINES, CalCurve


def _write_curve(tmp_path, rows):
    header = [f"# header line {n}" for n in range(HEADER_LINES)]
    path = tmp_path / "curve.14c"
    path.write_text("\n".join(header + rows) + "\n", encoding="utf-8")
    return path


def test_from_file_skips_header_and_reads_rows(tmp_path):
    path = _write_curve(tmp_path, ["300,250,12,1.0,2.0", "295,248,11,1.0,2.0"])
    curve = CalCurve.from_file(path)
    assert curve.cal_bp == [300, 295]
    assert curve.c14_bp == [250, 248]
    assert curve.error == [12, 11]
    assert curve.rows() == 2


def test_from_file_stops_at_short_line(tmp_path):
    path = _write_curve(
        tmp_path, ["300,250,12,1.0", "295,248,11", "290,240,10,1.0"]
    )
    curve = CalCurve.from_file(path)
    assert curve.cal_bp == [300]
    assert curve.rows() == 1


def test_from_file_non_numeric_field_is_zero(tmp_path):
    path = _write_curve(tmp_path, ["abc,250,12,0"])
    curve = CalCurve.from_file(path)
    assert curve.cal_bp == [0]


def test_from_file_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CalCurve.from_file(tmp_path / "missing.14c")


def test_min_and_max_bp():
    curve = CalCurve([50, 10, 30], [1, 2, 3], [1, 1, 1])
    assert curve.max_bp() == 50
    assert curve.min_bp() == 10


def test_empty_curve_has_no_extremes():
    curve = CalCurve()
    assert curve.rows() == 0
    with pytest.raises(ValueError):
        curve.max_bp()