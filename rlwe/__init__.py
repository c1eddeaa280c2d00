"""Ring-LWE building blocks: bit utilities, constants, error bounds, transcription and PRNGs."""

__version__ = "0.1.0"