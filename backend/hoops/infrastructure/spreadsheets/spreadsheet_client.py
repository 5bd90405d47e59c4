"""Spreadsheet list-feed client. Locates a worksheet's row-insertion URL and posts rows.

The API offers no direct "add row" URL for a spreadsheet key. It has to be
discovered in two hops:

1. the worksheets feed of the spreadsheet lists one entry per worksheet, each
   linking to that worksheet's list feed;
2. the list feed links to the URL rows are POSTed to.
"""

import logging
from dataclasses import dataclass

import httpx

from hoops.domain.exceptions import SpreadsheetRequestError, WorksheetNotFoundError
from hoops.infrastructure.spreadsheets.feeds import (
    LIST_FEED_REL,
    POST_REL,
    Feed,
    parse_feed,
)

logger = logging.getLogger(__name__)

DEFAULT_FEEDS_URL = "https://spreadsheets.google.com/feeds"
ATOM_CONTENT_TYPE = "application/atom+xml"


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise SpreadsheetRequestError(
        url=str(response.request.url),
        status_code=response.status_code,
        message=response.text[:500] or response.reason_phrase,
    )


@dataclass(frozen=True)
class Worksheet:
    """A worksheet whose row-insertion URL has been discovered."""

    http_client: httpx.AsyncClient
    post_url: str

    async def add_row(self, entry_xml: str) -> None:
        """POST one Atom row entry to the worksheet's list feed."""
        response = await self.http_client.post(
            self.post_url,
            content=entry_xml.encode("utf-8"),
            headers={"Content-Type": ATOM_CONTENT_TYPE},
        )
        _raise_for_status(response)
        logger.info("Added spreadsheet row via %s", self.post_url)


class SpreadsheetClient:
    """Infrastructure adapter — talks to the spreadsheet feeds API over an authorized client."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        key: str,
        feeds_url: str = DEFAULT_FEEDS_URL,
    ):
        self._http_client = http_client
        self._key = key
        self._feeds_url = feeds_url.rstrip("/")

    @property
    def worksheets_url(self) -> str:
        return f"{self._feeds_url}/worksheets/{self._key}/private/full"

    async def _get_feed(self, url: str) -> Feed:
        response = await self._http_client.get(url)
        _raise_for_status(response)
        return parse_feed(url, response.content)

    async def get_worksheet(self, index: int = 0) -> Worksheet:
        """Follow the worksheets feed and the list feed to the row-insertion URL."""
        worksheets = await self._get_feed(self.worksheets_url)
        if not 0 <= index < len(worksheets.entries):
            raise WorksheetNotFoundError(index, len(worksheets.entries))

        list_feed_url = worksheets.entries[index].link(LIST_FEED_REL)
        logger.debug("Worksheet %d list feed: %s", index, list_feed_url)

        list_feed = await self._get_feed(list_feed_url)
        post_url = list_feed.link(POST_REL)
        return Worksheet(http_client=self._http_client, post_url=post_url)
