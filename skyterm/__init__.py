"""
skyterm — planetarium core and sky chart.

Sidereal time and coordinate transforms, low-precision Sun/Moon/planet
positions, rise/set/transit times, and a layered character-cell renderer
with a terminal snapshot CLI and a pygame window.
"""

__version__ = "0.3.0"
