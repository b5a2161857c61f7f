"""formgrid: rebuild dense row/column form layouts from sparse authored field positions."""

__version__ = "0.1.0"
