"""Legal research API integration."""

from legal_review.research.client import (
    ResearchClient,
    ResearchError,
    TransientResearchError,
)

__all__ = [
    "ResearchClient",
    "ResearchError",
    "TransientResearchError",
]
