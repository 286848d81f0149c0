"""Configuration, default templates, index tree, summaries and manifests for Markdown pages built from Doxygen XML."""

__version__ = "0.1.0"