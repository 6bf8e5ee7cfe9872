"""
Route Report

This package provides tools for scanning a directory of route GeoJSON
files, stripping the bulky attribute fields during parsing, and listing
the routes whose geometry is made of more than one line segment.
"""

__version__ = "0.1.0"
