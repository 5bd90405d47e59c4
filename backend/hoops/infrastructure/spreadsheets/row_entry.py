"""Builds the Atom ``<entry>`` that inserts one hoop as a spreadsheet row."""

import xml.etree.ElementTree as ET

from hoops.domain.entities import HoopAttributes
from hoops.infrastructure.spreadsheets.feeds import ATOM_NS

GSX_NS = "http://schemas.google.com/spreadsheets/2006/extended"

ET.register_namespace("", ATOM_NS)
ET.register_namespace("gsx", GSX_NS)


def _row_values(attrs: HoopAttributes) -> list[tuple[str, str]]:
    # Column names are the spreadsheet's header row, lower-cased without spaces.
    return [
        ("id", attrs.id),
        ("location", attrs.location),
        ("lat", f"{attrs.lat:f}"),
        ("lng", f"{attrs.lng:f}"),
        ("image", attrs.image),
        ("story", attrs.story),
        ("contactok", "true" if attrs.contact_ok else "false"),
        ("email", attrs.email),
        ("phone", attrs.phone),
        ("created", attrs.created.isoformat()),
    ]


def build_row_entry(attrs: HoopAttributes) -> str:
    """Serialize a hoop record as a list-feed row entry."""
    entry = ET.Element(f"{{{ATOM_NS}}}entry")
    for column, value in _row_values(attrs):
        ET.SubElement(entry, f"{{{GSX_NS}}}{column}").text = value
    return ET.tostring(entry, encoding="unicode")
