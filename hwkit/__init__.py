"""Command-line tools for ZipJpeg listing, code-page conversion, word counting and weather, with a JSON tree library."""

__version__ = "0.1.0"