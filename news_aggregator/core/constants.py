"""System constants and enumerations.

This module defines constants used throughout the application for consistency
and maintainability.
"""

from enum import Enum


class Region(str, Enum):
    """South Indian states covered by the regional feed adapters."""

    TAMIL_NADU = "tamilnadu"
    KERALA = "kerala"
    KARNATAKA = "karnataka"
    ANDHRA_PRADESH = "andhrapradesh"
    TELANGANA = "telangana"


# Category assigned to regional feed items that carry no <category> element
DEFAULT_FEED_CATEGORY = "general"

# Inline SVG "No Image" tile used when an article has no recoverable image
PLACEHOLDER_IMAGE = (
    "data:image/svg+xml;base64,"
    "PHN2ZyB3aWR0aD0iMTgwIiBoZWlnaHQ9IjEyMCIgeG1sbnM9Imh0dHA6Ly93d3cudzMub3Jn"
    "LzIwMDAvc3ZnIj48cmVjdCB3aWR0aD0iMTAwJSIgaGVpZ2h0PSIxMDAlIiBmaWxsPSIjY2Nj"
    "Ii8+PHRleHQgeD0iNTAlIiB5PSI1MCUiIGZvbnQtc2l6ZT0iMTQiIGZpbGw9IiMwMDAiIHRl"
    "eHQtYW5jaG9yPSJtaWRkbGUiIGR5PSIuM2VtIj5ObyBJbWFnZTwvdGV4dD48L3N2Zz4="
)

# XML namespaces used by Atom and Media RSS feeds
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
MEDIA_NAMESPACE = "http://search.yahoo.com/mrss/"

# Aggregation defaults
DEFAULT_MAX_RESULTS = 10
DEFAULT_SOURCE_TIMEOUT_SECONDS = 3.0
DEFAULT_CACHE_TTL_SECONDS = 300.0
