"""Best-effort image recovery for articles without an image.

The description is treated as opaque text: the first ``<img src="...">`` is
located with a pattern match, never parsed or rendered.
"""

import re

from news_aggregator.core.constants import PLACEHOLDER_IMAGE
from news_aggregator.models.article import Article

IMG_SRC_PATTERN = re.compile(r'<img[^>]+src="([^">]+)"')


def extract_image_url(markup: str | None) -> str | None:
    """Return the first image-tag ``src`` in ``markup``, if any."""
    if not markup:
        return None
    match = IMG_SRC_PATTERN.search(markup)
    return match.group(1) if match else None


def recover_image(article: Article) -> Article:
    """Ensure an article has an image.

    Articles that already have one are returned unchanged. Otherwise the first
    image in the description is used, falling back to ``PLACEHOLDER_IMAGE``.
    Applying this twice gives the same result as applying it once.

    Args:
        article: Article to resolve

    Returns:
        Article with ``image`` populated
    """
    if article.image:
        return article

    image = extract_image_url(article.description) or PLACEHOLDER_IMAGE
    return article.model_copy(update={"image": image})
