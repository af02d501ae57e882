import json

import pytest

from c14calib.cli import (
    InputFormat,
    check_input_format,
    csv_input_to_json,
    main,
    validate_numeric_string,
)


@pytest.fixture
def curve_path(tmp_path):
    lines = [f"# header {n}\n" for n in range(11)]
    lines += [f"{y},{y},10,0,0\n" for y in range(1000, -1, -10)]
    path = tmp_path / "curve.14c"
    path.write_text("".join(lines))
    return str(path)


@pytest.mark.parametrize("text,expected", [("123", True), ("12a", False), ("", True), ("-5", False)])
def test_validate_numeric_string(text, expected):
    assert validate_numeric_string(text) is expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"a": 1}', InputFormat.JSON),
        ("[1]", InputFormat.JSON),
        ('"A",1,2', InputFormat.CSV),
        ("name,bp,std", InputFormat.CSV),
        ("1,2,3", InputFormat.UNKNOWN),
        ("", InputFormat.UNKNOWN),
    ],
)
def test_check_input_format(text, expected):
    assert check_input_format(text) is expected


def test_csv_with_header():
    assert csv_input_to_json("name,bp,std\nA,500,20\n") == {"A": {"bp": 500, "std": 20}}


def test_csv_quoted_names_without_header():
    result = csv_input_to_json("\"A\",500,20\n'B',300,30\n")
    assert result == {"A": {"bp": 500, "std": 20}, "B": {"bp": 300, "std": 30}}


@pytest.mark.parametrize("text", ['"A",-5,20\n', '"A",0,20\n', '"A",500\n', '"A",5x0,20\n'])
def test_csv_invalid_rows(text):
    with pytest.raises(ValueError):
        csv_input_to_json(text)


def test_main_bp_std_json(curve_path, capsys):
    assert main(["-b", "500", "-s", "20", "--curve", curve_path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert list(out) == ["date"]
    assert out["date"]["uncal_bp"] == 500
    assert out["date"]["sigma_ranges"] is None


def test_main_csv_output(curve_path, capsys):
    assert main(["-b", "500", "-s", "20", "-o", "csv", "--curve", curve_path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "name,bp,probability"
    assert all(line.startswith("date,") for line in lines[1:] if line)


def test_main_csv_file_with_ranges_and_sum(curve_path, tmp_path, capsys):
    data = tmp_path / "dates.csv"
    data.write_text("name,bp,std\nA,500,20\nB,300,30\n")
    assert main([str(data), "-r", "--sum", "--curve", curve_path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert set(out) == {"A", "B", "sum"}
    assert all(r["begin"] >= r["end"] for r in out["A"]["sigma_ranges"])


def test_main_json_string(curve_path, capsys):
    assert main(["-j", '{"X": {"bp": 400, "std": 25}}', "--curve", curve_path]) == 0
    assert json.loads(capsys.readouterr().out)["X"]["uncal_error"] == 25


def test_main_invalid_output(curve_path, capsys):
    assert main(["-b", "500", "-s", "20", "-o", "xml", "--curve", curve_path]) == 1
    assert "Invalid output format!" in capsys.readouterr().out


def test_main_missing_input_file(curve_path, tmp_path, capsys):
    assert main([str(tmp_path / "none.csv"), "--curve", curve_path]) == 1
    assert "Unable to open file" in capsys.readouterr().out


def test_main_missing_curve(tmp_path, capsys):
    missing = str(tmp_path / "none.14c")
    assert main(["-b", "500", "-s", "20", "--curve", missing]) == 1
    assert "does not exist" in capsys.readouterr().out