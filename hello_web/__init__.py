"""Hello World demonstrations: a console greeting and a small HTTP service."""

__version__ = "0.1.0"
