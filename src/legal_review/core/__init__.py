"""Core rendering logic for Legal Review."""

from legal_review.core.models import RenderRequest, RenderedDocument
from legal_review.core.renderer import DocumentRenderer, EncodingError, RenderError

__all__ = [
    "RenderRequest",
    "RenderedDocument",
    "DocumentRenderer",
    "EncodingError",
    "RenderError",
]
