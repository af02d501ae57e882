"""Radiocarbon date calibration against a calibration curve, with JSON and CSV output."""

__version__ = "0.1.0"