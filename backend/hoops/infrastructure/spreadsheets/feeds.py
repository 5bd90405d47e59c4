"""Atom feed parsing for the spreadsheet list-feed API.

Only links matter here: every feed and every entry carries ``<link rel=...
href=...>`` elements, and the row-insertion URL is found by following them.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from hoops.domain.exceptions import FeedFormatError, LinkRelationNotFoundError

ATOM_NS = "http://www.w3.org/2005/Atom"

LIST_FEED_REL = "http://schemas.google.com/spreadsheets/2006#listfeed"
POST_REL = "http://schemas.google.com/g/2005#post"


def _atom(tag: str) -> str:
    return f"{{{ATOM_NS}}}{tag}"


def _links(element: ET.Element) -> dict[str, str]:
    """Collect ``rel → href`` for the element's direct ``<link>`` children.

    When a relation repeats, the last link wins.
    """
    links: dict[str, str] = {}
    for link in element.findall(_atom("link")):
        rel = link.get("rel")
        href = link.get("href")
        if rel and href:
            links[rel] = href
    return links


@dataclass(frozen=True)
class FeedEntry:
    links: dict[str, str] = field(default_factory=dict)
    source: str = "feed entry"

    def link(self, rel: str) -> str:
        try:
            return self.links[rel]
        except KeyError:
            raise LinkRelationNotFoundError(rel, self.source) from None


@dataclass(frozen=True)
class Feed:
    url: str
    links: dict[str, str] = field(default_factory=dict)
    entries: list[FeedEntry] = field(default_factory=list)

    def link(self, rel: str) -> str:
        try:
            return self.links[rel]
        except KeyError:
            raise LinkRelationNotFoundError(rel, f"feed {self.url}") from None


def parse_feed(url: str, content: bytes | str) -> Feed:
    """Parse an Atom ``<feed>`` document fetched from ``url``."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise FeedFormatError(url, str(exc)) from exc

    if root.tag != _atom("feed"):
        raise FeedFormatError(url, f"unexpected root element {root.tag}")

    entries = [
        FeedEntry(links=_links(entry), source=f"entry {index} of {url}")
        for index, entry in enumerate(root.findall(_atom("entry")))
    ]
    return Feed(url=url, links=_links(root), entries=entries)
