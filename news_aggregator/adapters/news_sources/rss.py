"""Helpers for reading RSS 2.0 and Atom documents.

Feeds are parsed with ``xml.etree.ElementTree``; these helpers hide the
namespace handling and missing-element checks shared by the feed adapters.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from news_aggregator.core.constants import ATOM_NAMESPACE, MEDIA_NAMESPACE

NAMESPACES = {"atom": ATOM_NAMESPACE, "media": MEDIA_NAMESPACE}


def element_text(parent: ET.Element, path: str) -> Optional[str]:
    """Return the stripped text of the first element at ``path``, if any."""
    elem = parent.find(path, NAMESPACES)
    if elem is None or elem.text is None:
        return None
    return elem.text.strip() or None


def rss_channel(root: ET.Element) -> ET.Element:
    """Return the ``<channel>`` element of an RSS 2.0 document.

    Raises:
        ValueError: If the document is not RSS
    """
    channel = root if root.tag == "channel" else root.find("channel")
    if channel is None:
        raise ValueError(f"Not an RSS document (root element <{root.tag}>)")
    return channel


def atom_entries(root: ET.Element) -> list[ET.Element]:
    """Return the ``<entry>`` elements of an Atom feed.

    Raises:
        ValueError: If the document is not Atom
    """
    if root.tag != f"{{{ATOM_NAMESPACE}}}feed":
        raise ValueError(f"Not an Atom feed (root element <{root.tag}>)")
    return root.findall("atom:entry", NAMESPACES)


def media_url(entry: ET.Element) -> Optional[str]:
    """Return the Media RSS content or thumbnail URL of an entry, if any."""
    for path in ("media:content", "media:thumbnail"):
        elem = entry.find(path, NAMESPACES)
        if elem is not None and elem.get("url"):
            return elem.get("url")
    return None
