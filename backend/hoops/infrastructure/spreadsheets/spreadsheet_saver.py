"""Record persistence into a spreadsheet, implementing the HoopSaver port."""

import logging

from hoops.application.interfaces import CredentialProvider, HoopSaver
from hoops.domain.entities import Hoop
from hoops.infrastructure.spreadsheets.row_entry import build_row_entry
from hoops.infrastructure.spreadsheets.spreadsheet_client import (
    DEFAULT_FEEDS_URL,
    SpreadsheetClient,
)

logger = logging.getLogger(__name__)


class GoogleSpreadsheetHoopSaver(HoopSaver):
    """Appends each saved hoop as a row of one worksheet.

    A fresh authorized client is requested for every save and closed
    afterwards. Any failure along the discovery chain aborts the save
    before anything is posted.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        key: str,
        worksheet_index: int = 0,
        feeds_url: str = DEFAULT_FEEDS_URL,
    ):
        self._credentials = credentials
        self._key = key
        self._worksheet_index = worksheet_index
        self._feeds_url = feeds_url

    async def save(self, hoop: Hoop) -> None:
        entry_xml = build_row_entry(hoop.attributes)
        http_client = await self._credentials.get_client()
        async with http_client:
            spreadsheet = SpreadsheetClient(http_client, self._key, self._feeds_url)
            worksheet = await spreadsheet.get_worksheet(self._worksheet_index)
            await worksheet.add_row(entry_xml)
        logger.info("Replicated hoop %s to spreadsheet %s", hoop.id, self._key)
