"""
Sia Command-Line Interface
==========================

This package provides the ``sia`` compiler driver. It is a Click
application that hands the raw argument list to sia.cmdline, so the
option syntax and validation rules are those of the Sia option parser.
"""

__all__ = ["sia"]
