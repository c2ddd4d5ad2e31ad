"""Output tree generation."""

from moss.site.materializer import SITE_DIR, SiteMaterializer, generate
from moss.site.pipeline import build, compile_folder, generate_site, summarize

__all__ = [
    "SITE_DIR",
    "SiteMaterializer",
    "build",
    "compile_folder",
    "generate",
    "generate_site",
    "summarize",
]
