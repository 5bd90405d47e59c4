"""Intake transform: turns submitted form fields into a populated Hoop.

Every recognised field is coerced to its attribute's type. A value that
does not coerce is ignored and the attribute keeps its previous value;
intake never fails because of malformed input.
"""

import logging
import math
from collections.abc import Callable, Mapping

from hoops.domain.entities import ACCEPTED_IMAGE_TYPES, Hoop, PendingUpload

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(value: str) -> bool:
    """Parse the textual boolean forms accepted in forms; raises ValueError otherwise."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}")


def parse_coordinate(value: str) -> float:
    """Parse a decimal number; rejects nan and infinities, which JSON cannot carry."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite number {value!r}")
    return number


def _text(value: str) -> str:
    return value


_Setter = Callable[[Hoop, object], None]

# form field → (parser, setter)
FIELD_SETTERS: dict[str, tuple[Callable[[str], object], _Setter]] = {
    "location": (_text, Hoop.set_location),
    "lat": (parse_coordinate, Hoop.set_lat),
    "lng": (parse_coordinate, Hoop.set_lng),
    "story": (_text, Hoop.set_story),
    "contact-ok": (parse_bool, Hoop.set_contact_ok),
    "email": (_text, Hoop.set_email),
    "phone": (_text, Hoop.set_phone),
}


class HoopIntake:
    """Maps raw form data onto a :class:`Hoop`."""

    def __init__(self, hoop_factory: Callable[[], Hoop] = Hoop.create):
        self._hoop_factory = hoop_factory

    @staticmethod
    def set_field(hoop: Hoop, name: str, value: str) -> bool:
        """Coerce ``value`` and assign it to the field behind form name ``name``.

        Returns False, leaving the hoop untouched, when the name is unknown
        or the value does not coerce.
        """
        try:
            parse, setter = FIELD_SETTERS[name]
        except KeyError:
            return False
        try:
            parsed = parse(value)
        except ValueError:
            logger.debug("Ignoring unparseable %s=%r for hoop %s", name, value, hoop.id)
            return False
        setter(hoop, parsed)
        return True

    @staticmethod
    def attach(hoop: Hoop, upload: PendingUpload | None) -> bool:
        """Keep ``upload`` as the hoop's pending image when it is a JPEG or PNG."""
        if upload is None:
            return False
        if upload.content_type not in ACCEPTED_IMAGE_TYPES:
            logger.warning(
                "Dropping attachment of type %r for hoop %s", upload.content_type, hoop.id
            )
            return False
        hoop.attach_upload(upload)
        return True

    def from_form(
        self,
        fields: Mapping[str, str],
        upload: PendingUpload | None = None,
        hoop: Hoop | None = None,
    ) -> Hoop:
        """Populate ``hoop`` (a new one by default) from form fields and an optional upload."""
        if hoop is None:
            hoop = self._hoop_factory()
        for name, value in fields.items():
            self.set_field(hoop, name, value)
        self.attach(hoop, upload)
        return hoop
