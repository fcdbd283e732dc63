"""Early-grade illustration lookup."""
from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ImageLookup(Protocol):
    def lookup(self, topic: str, question_text: str) -> str | None:
        ...


class KeywordImageLookup:
    """
    Maps lower-case keywords to image URLs.

    The question text is searched first, then the topic; the first keyword
    found (in mapping order) wins.
    """

    def __init__(self, images: dict[str, str] | None = None):
        self.images = {k.lower(): v for k, v in (images or {}).items() if v}

    def lookup(self, topic: str, question_text: str) -> str | None:
        for haystack in (question_text.lower(), topic.lower()):
            for keyword, url in self.images.items():
                if keyword in haystack:
                    return url
        return None


def get_image_lookup(settings=None) -> KeywordImageLookup:
    if settings is None:
        from worksheet_ai.core.config import get_settings
        settings = get_settings()
    if not settings.early_grade_images:
        logger.debug("No early-grade images configured")
    return KeywordImageLookup(settings.early_grade_images)
