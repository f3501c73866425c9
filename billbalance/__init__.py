"""
Bill Balance - Source Package

A small command-line tool for people who get paid once a month and
want to know how much of their balance is actually spendable.

DESIGN PRINCIPLES:
1. Bills are recurring monthly obligations on a fixed day of month
2. The projection core is pure - no I/O, no clock, no globals
3. Bad input is rejected at the boundary, never silently fixed
4. Storage location is passed in explicitly, never looked up ambiently
"""

__version__ = "1.0.0"
__author__ = "Bill Balance Team"
