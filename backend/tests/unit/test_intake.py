"""Unit tests for the intake transform (form fields → Hoop)."""

import pytest

from hoops.application.services import HoopIntake
from hoops.application.services.intake_service import parse_bool
from hoops.domain.entities import PendingUpload


@pytest.fixture
def intake() -> HoopIntake:
    return HoopIntake()


FORM = {
    "location": "Court A",
    "lat": "41.8",
    "lng": "-87.6",
    "story": "Great hoop",
    "contact-ok": "true",
    "email": "a@b.com",
    "phone": "555-1212",
}


def test_from_form_populates_every_field(intake: HoopIntake):
    attrs = intake.from_form(FORM).attributes

    assert attrs.location == "Court A"
    assert attrs.lat == 41.8
    assert attrs.lng == -87.6
    assert attrs.story == "Great hoop"
    assert attrs.contact_ok is True
    assert attrs.email == "a@b.com"
    assert attrs.phone == "555-1212"
    assert attrs.image == ""
    assert attrs.id


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("false", False), ("1", True), ("0", False), ("T", True), ("FALSE", False)],
)
def test_contact_ok_coercion(intake: HoopIntake, raw: str, expected: bool):
    assert intake.from_form({"contact-ok": raw}).attributes.contact_ok is expected


def test_bad_boolean_keeps_previous_value(intake: HoopIntake):
    hoop = intake.from_form({"contact-ok": "true"})
    assert HoopIntake.set_field(hoop, "contact-ok", "yes please") is False
    assert hoop.attributes.contact_ok is True


def test_non_numeric_lat_keeps_previous_value(intake: HoopIntake):
    hoop = intake.from_form({"lat": "41.8"})
    assert HoopIntake.set_field(hoop, "lat", "north-ish") is False
    assert hoop.attributes.lat == 41.8


@pytest.mark.parametrize("value", ["nan", "NaN", "inf", "-inf", "Infinity"])
def test_non_finite_coordinates_keep_previous_value(intake: HoopIntake, value: str):
    hoop = intake.from_form({"lat": "41.8", "lng": "-87.6"})
    assert HoopIntake.set_field(hoop, "lat", value) is False
    assert HoopIntake.set_field(hoop, "lng", value) is False
    assert hoop.attributes.lat == 41.8
    assert hoop.attributes.lng == -87.6


def test_empty_numbers_are_ignored(intake: HoopIntake):
    attrs = intake.from_form({"lat": "", "lng": ""}).attributes
    assert attrs.lat == 0.0
    assert attrs.lng == 0.0


def test_unknown_fields_are_ignored(intake: HoopIntake):
    hoop = intake.from_form({"Id": "forged", "image": "x.png"})
    assert hoop.attributes.id != "forged"
    assert hoop.attributes.image == ""


def test_text_is_assigned_verbatim(intake: HoopIntake):
    story = "  <b>spaces</b> & symbols  "
    assert intake.from_form({"story": story}).attributes.story == story


def test_parse_bool_rejects_other_text():
    with pytest.raises(ValueError):
        parse_bool("yes")


@pytest.mark.parametrize("content_type", ["image/png", "image/jpeg"])
def test_accepted_images_become_pending_upload(intake: HoopIntake, content_type: str):
    upload = PendingUpload(content=b"data", content_type=content_type)
    hoop = intake.from_form({}, upload)
    assert hoop.pending_upload == upload


@pytest.mark.parametrize("content_type", ["image/gif", "application/pdf", "", "image/PNG"])
def test_other_attachments_are_dropped(intake: HoopIntake, content_type: str):
    hoop = intake.from_form({}, PendingUpload(content=b"data", content_type=content_type))
    assert hoop.pending_upload is None


def test_from_form_uses_factory():
    calls = []

    def factory():
        from hoops.domain.entities import Hoop

        hoop = Hoop.create()
        calls.append(hoop)
        return hoop

    hoop = HoopIntake(hoop_factory=factory).from_form({"story": "x"})
    assert calls == [hoop]
