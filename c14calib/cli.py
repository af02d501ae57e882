"""Command line interface for calibrating radiocarbon dates."""

from __future__ import annotations

import argparse
import json
import sys
from enum import Enum

from .cal_curve import CalCurve
from .uncal_date import UncalDate
from .uncal_date_list import UncalDateList

DEFAULT_CURVE = "../data/intcal20.14c"
_DIGITS = frozenset("0123456789")


class InputFormat(Enum):
    """Guessed format of an input document."""

    UNKNOWN = 0
    JSON = 1
    CSV = 2


def validate_numeric_string(text: str) -> bool:
    """True if ``text`` holds only ASCII digits (an empty string qualifies)."""
    return all(ch in _DIGITS for ch in text)


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def check_input_format(text: str) -> InputFormat:
    """Guess from the first character whether ``text`` is JSON or CSV."""
    if not text:
        return InputFormat.UNKNOWN
    first = text[0]
    if first in "{[":
        return InputFormat.JSON
    if first in "\"'" or _is_alpha(first):
        return InputFormat.CSV
    return InputFormat.UNKNOWN


def csv_input_to_json(text: str) -> dict:
    """Turn ``name,bp,std`` lines into a mapping of name to ``{"bp", "std"}``.

    A first line starting with a letter is taken as a header. Raises
    ``ValueError`` on any malformed line.
    """
    result: dict = {}
    if not text:
        return result
    header_lines = 1 if _is_alpha(text[0]) else 0
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines[header_lines:]:
        parts = line.split(",")
        name = parts[0]
        bp_text = parts[1] if len(parts) > 1 else ""
        std_text = parts[2] if len(parts) > 2 else ""
        if not (name and bp_text and std_text):
            raise ValueError(f"missing field in line {line!r}")
        bp = int(bp_text) if validate_numeric_string(bp_text) else -1
        std = int(std_text) if validate_numeric_string(std_text) else -1
        if bp <= 0 or std <= 0:
            raise ValueError(f"invalid bp or std in line {line!r}")
        name = name.replace('"', "").replace("'", "")
        result[name] = {"bp": bp, "std": std}
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A tool for 14C calibration from the command line."
    )
    parser.add_argument("files", nargs="*", help="Specifies input file.")
    parser.add_argument("-i", "--input-file", action="append", default=[],
                        help="Specifies input file.")
    parser.add_argument("-b", "--bp", action="append", type=int, help="The BP Value.")
    parser.add_argument("-s", "--std", action="append", type=int,
                        help="The standard deviation.")
    parser.add_argument("-j", "--json-string", action="append",
                        help='Input as a JSON string. Format: {"bp": xx, "std": xx}')
    parser.add_argument("-r", "--ranges", action="store_true",
                        help="calculate sigma ranges (only for json output).")
    parser.add_argument("--sum", action="store_true", help="calculate sum probability.")
    parser.add_argument("-o", "--output", default="json",
                        help="csv for csv-output, json for json (default).")
    parser.add_argument("--curve", default=DEFAULT_CURVE,
                        help="Path of the calibration curve file.")
    return parser


def _read_input_file(path: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return "".join(line.rstrip("\n") + "\n" for line in handle)
    except OSError:
        print("Unable to open file")
        return ""


def _load_input(path: str) -> dict | list:
    content = _read_input_file(path)
    fmt = check_input_format(content)
    if fmt is InputFormat.JSON:
        return json.loads(content)
    if fmt is InputFormat.CSV:
        return csv_input_to_json(content)
    raise ValueError("Invalid file format!")


def main(argv: list[str] | None = None) -> int:
    """Run the calibrator and print the result; returns the exit status."""
    args = _build_parser().parse_args(argv)
    data: dict | list = {}

    input_files = args.input_file + args.files
    if input_files:
        try:
            data = _load_input(input_files[0])
        except json.JSONDecodeError as exc:
            print(f"Invalid JSON input: {exc}")
            return 1
        except ValueError as exc:
            print("Invalid file format!")
            if str(exc) != "Invalid file format!":
                print('Please use "DateName",bp,std')
            return 1

    if args.json_string:
        try:
            data = json.loads(args.json_string[0])
        except json.JSONDecodeError as exc:
            print(f"Invalid JSON input: {exc}")
            return 1

    if args.bp and args.std:
        if not isinstance(data, dict):
            data = {}
        data["date"] = {"bp": args.bp[0], "std": args.std[0]}

    if not isinstance(data, dict):
        print("Input must map date names to bp and std values.")
        return 1

    uncal_dates = UncalDateList()
    try:
        for name, value in sorted(data.items()):
            uncal_dates.append(UncalDate(name, int(value["bp"]), int(value["std"])))
    except (KeyError, TypeError, ValueError):
        print("Every date needs numeric bp and std values.")
        return 1

    try:
        curve = CalCurve.from_file(args.curve)
    except OSError:
        print(f"{args.curve} does not exist")
        return 1

    cal_dates = uncal_dates.calibrate(curve)

    if args.sum:
        cal_dates.sum()

    if args.ranges and args.output != "csv":
        for date in cal_dates:
            date.calculate_sigma_ranges()

    if args.output == "json":
        print(json.dumps(cal_dates.to_json(), sort_keys=True, separators=(",", ":")))
    elif args.output == "csv":
        print(cal_dates.to_csv())
    else:
        sys.stdout.write("Invalid output format!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())