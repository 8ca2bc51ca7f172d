"""Service module exports."""

from . import export_csv, habits, scoring, summary

__all__ = ["export_csv", "habits", "scoring", "summary"]
