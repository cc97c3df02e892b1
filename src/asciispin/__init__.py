"""Spin a still image as rotating ASCII art."""

__version__ = "0.1.0"
