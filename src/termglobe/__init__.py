"""
TermGlobe - Terminal World Map with IP Geolocation

A terminal app that looks up where you are from your public IP
and marks it on a braille world map.
"""

__version__ = "1.0.0"

from .cli import run

__all__ = ["run"]
