"""Spreadsheet list-feed infrastructure package."""

from .spreadsheet_client import SpreadsheetClient, Worksheet
from .spreadsheet_saver import GoogleSpreadsheetHoopSaver

__all__ = ["GoogleSpreadsheetHoopSaver", "SpreadsheetClient", "Worksheet"]
