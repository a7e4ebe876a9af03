"""socio - share links and JSON-LD structured data for content sites."""

__version__ = "0.1.0"
