"""Course exercises, small demo programs, and a tool that extracts exercise files from Markdown."""

__version__ = "0.1.0"