"""Hirelens — job posting quality analysis and resume ATS check."""

__version__ = "0.3.0"
