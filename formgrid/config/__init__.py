"""Configuration loading for formgrid."""
