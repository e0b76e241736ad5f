"""DICOM data elements, datasets, date/time values, character sets and binary I/O."""

__version__ = "0.1.0"