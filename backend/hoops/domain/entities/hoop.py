"""Hoop entity — a user-submitted location report and its persisted record."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from hoops.domain.exceptions import (
    HoopAlreadySavedError,
    IdentityGenerationError,
    UnsupportedMediaTypeError,
)

if TYPE_CHECKING:
    from hoops.application.interfaces import HoopMediaSaver, HoopSaver

logger = logging.getLogger(__name__)

ACCEPTED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png"})

_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
}


def extension_for(content_type: str) -> str:
    """Map a declared image content type to the file extension it is stored under."""
    try:
        return _EXTENSIONS[content_type]
    except KeyError:
        raise UnsupportedMediaTypeError(content_type) from None


def storage_key(created: datetime, hoop_id: str) -> str:
    """Build the key records and media are stored under: ``<YYYYMMDD><id without dashes>``."""
    return created.strftime("%Y%m%d") + hoop_id.replace("-", "")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HoopAttributes:
    """Immutable snapshot of everything persisted for a hoop."""

    id: str
    created: datetime
    location: str = ""
    lat: float = 0.0
    lng: float = 0.0
    image: str = ""
    story: str = ""
    contact_ok: bool = False
    email: str = ""
    phone: str = ""

    @property
    def storage_key(self) -> str:
        return storage_key(self.created, self.id)


@dataclass(frozen=True)
class PendingUpload:
    """An attachment received with a submission and not yet written anywhere."""

    content: bytes
    content_type: str


@dataclass
class Hoop:
    """Core domain entity wrapping a :class:`HoopAttributes` record.

    Identity and creation time are fixed at construction. The remaining
    fields can be changed through the typed setters until the hoop has been
    saved.
    """

    _attributes: HoopAttributes
    _pending_upload: PendingUpload | None = None
    _saved: bool = field(default=False, repr=False)

    @classmethod
    def create(
        cls,
        id_factory: Callable[[], Any] = uuid.uuid4,
        clock: Callable[[], datetime] = _utcnow,
    ) -> "Hoop":
        """Start a new hoop with a fresh random id and the current time."""
        try:
            hoop_id = str(id_factory())
        except Exception as exc:
            raise IdentityGenerationError(str(exc)) from exc
        if not hoop_id:
            raise IdentityGenerationError("identifier is empty")
        return cls(HoopAttributes(id=hoop_id, created=clock()))

    @classmethod
    def from_attributes(cls, attributes: HoopAttributes) -> "Hoop":
        """Rebuild an entity around a previously saved record."""
        return cls(attributes)

    # ── Accessors ───────────────────────────────────────────────────

    @property
    def attributes(self) -> HoopAttributes:
        return self._attributes

    @property
    def id(self) -> str:
        return self._attributes.id

    @property
    def created(self) -> datetime:
        return self._attributes.created

    @property
    def image(self) -> str:
        return self._attributes.image

    @property
    def storage_key(self) -> str:
        return self._attributes.storage_key

    @property
    def pending_upload(self) -> PendingUpload | None:
        return self._pending_upload

    @property
    def saved(self) -> bool:
        return self._saved

    # ── Mutation ────────────────────────────────────────────────────

    def _replace(self, field_name: str, value: Any) -> None:
        if self._saved:
            raise HoopAlreadySavedError(self.id, field_name)
        self._attributes = dataclasses.replace(self._attributes, **{field_name: value})

    def set_location(self, value: str) -> None:
        self._replace("location", value)

    def set_lat(self, value: float) -> None:
        self._replace("lat", value)

    def set_lng(self, value: float) -> None:
        self._replace("lng", value)

    def set_story(self, value: str) -> None:
        self._replace("story", value)

    def set_contact_ok(self, value: bool) -> None:
        self._replace("contact_ok", value)

    def set_email(self, value: str) -> None:
        self._replace("email", value)

    def set_phone(self, value: str) -> None:
        self._replace("phone", value)

    def attach_upload(self, upload: PendingUpload) -> None:
        if self._saved:
            raise HoopAlreadySavedError(self.id, "upload")
        self._pending_upload = upload

    def assign_image(self, filename: str) -> None:
        """Record the filename the media backend stored the attachment under."""
        if self._attributes.image:
            raise HoopAlreadySavedError(self.id, "image")
        self._replace("image", filename)

    # ── Persistence ─────────────────────────────────────────────────

    async def save(
        self,
        media_saver: "HoopMediaSaver | None",
        saver: "HoopSaver",
    ) -> None:
        """Persist the attachment (best-effort) and then the record (required).

        A failing media saver is logged and leaves ``image`` empty; a failing
        record saver propagates to the caller.
        """
        upload = self._pending_upload
        if upload is not None and media_saver is not None:
            try:
                filename = await media_saver.save(self, upload.content, upload.content_type)
            except Exception:
                logger.exception("Could not save image for hoop %s", self.id)
            else:
                self.assign_image(filename)
        self._pending_upload = None

        await saver.save(self)
        self._saved = True

    def __str__(self) -> str:
        return "".join(
            f"{f.name}: {getattr(self._attributes, f.name)}\n"
            for f in dataclasses.fields(self._attributes)
        )
