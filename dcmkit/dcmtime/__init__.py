"""Parsing and formatting of DICOM DA, TM and DT values with precision tracking."""