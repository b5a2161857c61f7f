"""Logging setup and structured error log for formgrid."""
