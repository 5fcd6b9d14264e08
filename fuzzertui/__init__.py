"""Terminal interface for creating, opening and viewing the configuration of fuzzing projects."""

__version__ = "0.1.0"