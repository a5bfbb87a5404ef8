"""Content discovery and metadata parsing."""

from .front_matter import split_front_matter
from .loader import ContentLoader, SourceFile
from .models import ContentItem, ContentSet, derive_output_path, derive_title

__all__ = [
    "ContentItem",
    "ContentLoader",
    "ContentSet",
    "SourceFile",
    "derive_output_path",
    "derive_title",
    "split_front_matter",
]
