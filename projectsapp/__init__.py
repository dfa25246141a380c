"""Projects Manager: a console tool for tracking DIY project records."""

__version__ = "0.1.0"
