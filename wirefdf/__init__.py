"""Height-map reading, pixel images, colour helpers and XPM loading."""

__version__ = "0.1.0"