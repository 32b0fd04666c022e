"""
Saturn IP Command-Line Interface
================================

This package provides the **satip** command-line tool, a Click-based
application for inspecting and validating the System ID of Sega Saturn
disc images.
"""

__all__ = ["satip"]
