"""Unit tests for the Hoop entity: identity, storage key, mutation, and save orchestration."""

import uuid
from datetime import datetime, timezone

import pytest

from hoops.application.interfaces import HoopMediaSaver, HoopSaver
from hoops.domain.entities import Hoop, HoopAttributes, PendingUpload, storage_key
from hoops.domain.exceptions import HoopAlreadySavedError, IdentityGenerationError


# ── Fakes ────────────────────────────────────────────────────────────

class FakeSaver(HoopSaver):
    """Remembers every snapshot it was asked to save."""

    def __init__(self, error: Exception | None = None):
        self.saved: list[HoopAttributes] = []
        self._error = error

    async def save(self, hoop: Hoop) -> None:
        if self._error:
            raise self._error
        self.saved.append(hoop.attributes)


class FakeMediaSaver(HoopMediaSaver):
    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[str, bytes, str]] = []
        self._error = error

    async def save(self, hoop: Hoop, content: bytes, content_type: str) -> str:
        self.calls.append((hoop.id, content, content_type))
        if self._error:
            raise self._error
        return hoop.storage_key + ".png"


CREATED = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)
FIXED_ID = "3f2b8c1e-5d4a-4e6b-9a7c-0123456789ab"


@pytest.fixture
def hoop() -> Hoop:
    return Hoop.create(id_factory=lambda: FIXED_ID, clock=lambda: CREATED)


# ── Identity ─────────────────────────────────────────────────────────

def test_ids_are_non_empty_and_unique():
    ids = {Hoop.create().id for _ in range(10_000)}
    assert len(ids) == 10_000
    assert "" not in ids


def test_id_is_a_uuid4():
    parsed = uuid.UUID(Hoop.create().id)
    assert parsed.version == 4


def test_created_is_assigned_at_construction(hoop: Hoop):
    assert hoop.created == CREATED
    assert hoop.attributes.created == CREATED


def test_failing_id_factory_raises_identity_error():
    def broken():
        raise NotImplementedError("no randomness source")

    with pytest.raises(IdentityGenerationError) as exc_info:
        Hoop.create(id_factory=broken)
    assert "no randomness source" in str(exc_info.value)


def test_empty_id_raises_identity_error():
    with pytest.raises(IdentityGenerationError):
        Hoop.create(id_factory=lambda: "")


# ── Storage key ──────────────────────────────────────────────────────

def test_storage_key_is_date_prefix_plus_id_without_dashes(hoop: Hoop):
    assert hoop.storage_key == "20261019" + FIXED_ID.replace("-", "")


def test_storage_key_is_deterministic():
    assert storage_key(CREATED, FIXED_ID) == storage_key(CREATED, FIXED_ID)
    assert "-" not in storage_key(CREATED, FIXED_ID)


def test_storage_key_differs_per_id():
    assert storage_key(CREATED, str(uuid.uuid4())) != storage_key(CREATED, str(uuid.uuid4()))


# ── Mutation ─────────────────────────────────────────────────────────

def test_setters_replace_snapshot(hoop: Hoop):
    before = hoop.attributes
    hoop.set_location("Court A")
    hoop.set_lat(41.8)
    hoop.set_contact_ok(True)

    assert before.location == ""
    assert hoop.attributes.location == "Court A"
    assert hoop.attributes.lat == 41.8
    assert hoop.attributes.contact_ok is True


def test_attributes_snapshot_is_immutable(hoop: Hoop):
    with pytest.raises(AttributeError):
        hoop.attributes.location = "elsewhere"  # type: ignore[misc]


def test_str_lists_every_field(hoop: Hoop):
    hoop.set_story("Great hoop")
    rendered = str(hoop)
    assert f"id: {FIXED_ID}\n" in rendered
    assert "story: Great hoop\n" in rendered
    assert rendered.count("\n") == 10


def test_from_attributes_keeps_identity():
    attrs = HoopAttributes(id=FIXED_ID, created=CREATED, location="Court B")
    rebuilt = Hoop.from_attributes(attrs)
    assert rebuilt.attributes == attrs
    assert rebuilt.pending_upload is None


# ── Save orchestration ───────────────────────────────────────────────

@pytest.mark.asyncio
async def test_save_without_upload_skips_media(hoop: Hoop):
    media, saver = FakeMediaSaver(), FakeSaver()
    await hoop.save(media, saver)

    assert media.calls == []
    assert saver.saved == [hoop.attributes]
    assert hoop.image == ""
    assert hoop.saved


@pytest.mark.asyncio
async def test_save_assigns_image_before_record(hoop: Hoop):
    hoop.attach_upload(PendingUpload(content=b"\x89PNG", content_type="image/png"))
    media, saver = FakeMediaSaver(), FakeSaver()

    await hoop.save(media, saver)

    assert media.calls == [(FIXED_ID, b"\x89PNG", "image/png")]
    assert saver.saved[0].image == hoop.storage_key + ".png"
    assert hoop.pending_upload is None


@pytest.mark.asyncio
async def test_media_failure_does_not_block_record(hoop: Hoop):
    hoop.attach_upload(PendingUpload(content=b"jpeg", content_type="image/jpeg"))
    saver = FakeSaver()

    await hoop.save(FakeMediaSaver(error=OSError("disk full")), saver)

    assert len(saver.saved) == 1
    assert saver.saved[0].image == ""


@pytest.mark.asyncio
async def test_record_failure_propagates(hoop: Hoop):
    with pytest.raises(OSError, match="read-only"):
        await hoop.save(None, FakeSaver(error=OSError("read-only")))
    assert not hoop.saved


@pytest.mark.asyncio
async def test_saved_hoop_refuses_mutation(hoop: Hoop):
    await hoop.save(None, FakeSaver())
    with pytest.raises(HoopAlreadySavedError):
        hoop.set_story("changed")


def test_image_is_assigned_once(hoop: Hoop):
    hoop.assign_image("first.png")
    with pytest.raises(HoopAlreadySavedError):
        hoop.assign_image("second.png")
