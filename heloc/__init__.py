"""HELOC interest calculator: Flask web UI and JSON API."""

__version__ = "1.0.0"
