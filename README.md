# c14calib

A small command-line tool and library for calibrating radiocarbon (14C)
dates. You give it one or more uncalibrated dates. Each date is a
conventional radiocarbon age in years BP with its standard deviation. The
tool returns the calibrated probability distribution of each date as JSON
or CSV.

Calibration works like this:

- The calibration curve is interpolated onto a 5-year grid. The grid runs
  down from the curve's largest calibrated BP value.
- Each grid point is scored with a Student's t density with 100 degrees of
  freedom. The result is normalised.
- Grid points with a probability of `1e-5` or less are left out of the
  reported distribution.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Calibration curve

No calibration curve comes with the package, so you must supply one. The
curve is a comma-separated file in the IntCal `.14c` layout:

- The first 11 lines are a header and are skipped.
- Every line after that holds calibrated BP, 14C BP and the curve's error,
  with each field followed by a comma.
- Reading stops at the first line that does not have that shape.

The command looks for `../data/intcal20.14c` by default. Use `--curve` to
point it at another file.

## Command line

Installing the package adds the `c14calib` command.

Calibrate a single date given on the command line:

```
c14calib --curve intcal20.14c --bp 4000 --std 25
```

Calibrate the dates in an input file. The file can be JSON or CSV:

```
c14calib --curve intcal20.14c dates.csv
c14calib --curve intcal20.14c --input-file dates.json
```

Pass the dates as a JSON string:

```
c14calib --curve intcal20.14c --json-string '{"sample1": {"bp": 4000, "std": 25}}'
```

### Options

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Show the help text. |
| `-i`, `--input-file` | Input file in JSON or CSV format. It can also be given as a positional argument. Only the first file is read. |
| `-b`, `--bp` | Radiocarbon age in years BP. |
| `-s`, `--std` | Standard deviation of the age. |
| `-j`, `--json-string` | Input dates as a JSON string. This replaces any file input. |
| `-r`, `--ranges` | Calculate the 95.4 % sigma ranges. These are ignored for CSV output. |
| `--sum` | Add a summed probability distribution named `sum`. |
| `-o`, `--output` | `json` (the default) or `csv`. |
| `--curve` | Path of the calibration curve file. |

When both `--bp` and `--std` are given, they add a date named `date` to the
other input.

Dates are calibrated in order of their names.

The command returns exit status 1 in each of these cases:

- the input is malformed;
- the curve file is missing;
- the output format is unknown.

### Input formats

JSON input is an object keyed by date name:

```json
{
  "sample1": {"bp": 4000, "std": 25},
  "sample2": {"bp": 3500, "std": 30}
}
```

CSV input has one date per line, in the form `name,bp,std`:

- If the first line begins with a letter, it is treated as a header and
  skipped.
- Quotation marks in names are removed.
- Both `bp` and `std` must be positive whole numbers.

```
"sample1",4000,25
"sample2",3500,30
```

### Output formats

JSON output is a compact object with sorted keys, keyed by date name. Each
entry holds these fields:

- `uncal_bp`
- `uncal_error`
- `probabilities`
- `bp`
- `sigma_ranges`

`sigma_ranges` is `null` unless ranges were calculated. When they were, it
is a list of objects with `begin`, `end` and `sigma_level`.

CSV output has the header `name,bp,probability`. It is followed by one row
for each retained grid point of each date.

## Library use

```python
import random

from c14calib.cal_curve import CalCurve
from c14calib.uncal_date import UncalDate
from c14calib.uncal_date_list import UncalDateList

curve = CalCurve.from_file("intcal20.14c")

dates = UncalDateList()
dates.append(UncalDate("sample1", 4000, 25))
dates.append(UncalDate("sample2", 3500, 30))

calibrated = dates.calibrate(curve)   # a CalDateList
calibrated.sum()                      # appends a CalDate named "sum"
print(calibrated.to_csv())

for date in calibrated:
    date.calculate_sigma_ranges(random.Random(1))
print(calibrated.to_json())
```

### Modules and classes

- `c14calib.cal_curve.CalCurve` holds the lists `cal_bp`, `c14_bp` and
  `error`. It has these methods:
  - `from_file(path)`
  - `rows()`
  - `max_bp()`
  - `min_bp()`
- `c14calib.uncal_date.UncalDate(name, bp, std)` has `calibrate(curve)`,
  which returns a `CalDate`. The same module also provides
  `student_t_pdf(x, df)`.
- `c14calib.uncal_date_list.UncalDateList` has `append(date)` and
  `calibrate(curve)`.
- `c14calib.cal_date.CalDate` holds the reported `bp` and `probabilities`,
  the full grid in `full_bp` and `full_probabilities`, and `sigma_ranges`.
  It has these methods:
  - `to_json()`
  - `to_csv()`
  - `calculate_sigma_ranges(rng)`
  - `sigma_ranges_to_json()`
- `c14calib.cal_date_list.CalDateList` has these methods:
  - `append(date)`
  - `to_json()`
  - `to_csv()`
  - `sum()`
- `c14calib.sigma_range.SigmaRange(begin, end, sigma_level)` has
  `to_json()`.
- `c14calib.cli` provides these functions:
  - `main(argv)`
  - `check_input_format(text)`
  - `csv_input_to_json(text)`
  - `validate_numeric_string(text)`

### Sigma ranges

`calculate_sigma_ranges` estimates the ranges by random sampling, so results
can differ from run to run. Pass a seeded `random.Random` to get results you
can reproduce. The command line uses an unseeded generator.