"""Strava activity snapshot and viewer for the Terminus challenge."""

__version__ = "0.1.0"
