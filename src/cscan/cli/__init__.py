"""
cscan Command-Line Interface
============================

- **cscan**: scan a source file and print its tokens

Implemented as a Click application with consistent exit codes
(see cscan.cli.errors).
"""

__all__ = ["cscan"]
