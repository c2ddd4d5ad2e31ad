"""moss: turn a folder of documents into a static website."""

from moss.site import compile_folder, generate_site

__version__ = "0.1.0"

__all__ = ["__version__", "compile_folder", "generate_site"]
