"""
Tests for eventrecords.models — event and media item records.
"""

import pytest

from eventrecords.models.event import Event, MediaItem, ValidationFailed
from eventrecords.utils.dates import INVALID_DATE

class TestMediaItem:
    @pytest.mark.parametrize("mime, kind", [
        ("image/jpeg", "image"),
        ("video/mp4", "video"),
        ("audio/mpeg", "audio"),
        ("application/pdf", "pdf"),
        ("application/pdf+zip", "file"),
        ("text/csv", "file"),
    ])
    def test_kind_dispatch(self, mime, kind):
        assert MediaItem(type=mime, name="f", url="https://x/f").kind == kind

    def test_requires_exactly_one_reference(self):
        with pytest.raises(ValidationFailed):
            MediaItem(type="image/png", name="a")
        with pytest.raises(ValidationFailed):
            MediaItem(type="image/png", name="a", data="data:image/png;base64,AA==", url="https://x/a")

    def test_requires_type(self):
        with pytest.raises(ValidationFailed, match="MIME"):
            MediaItem(type="", name="a", url="https://x/a")

    def test_from_bytes_builds_data_url(self):
        item = MediaItem.from_bytes("hello.txt", "text/plain", b"hello")
        assert item.data == "data:text/plain;base64,aGVsbG8="
        assert item.url is None
        assert item.source == item.data

class TestEventSerialisation:
    def test_to_dict_uses_wire_keys(self, make_event):
        data = make_event(end_date="2024-02-06T17:00:00").to_dict()
        assert data['endDate'] == "2024-02-06T17:00:00"
        assert data['teamMembers'] == ["Asha", "Vikram"]
        assert data['participantsCount'] == 120
        assert data['media'] == [{'type': 'image/png', 'name': 'poster.png', 'url': 'https://files.example/poster.png'}]
        assert 'end_date' not in data

    def test_from_dict_inverts_to_dict(self, make_event):
        event = make_event()
        assert Event.from_dict(event.to_dict()) == event

    def test_from_dict_tolerates_missing_fields(self):
        event = Event.from_dict({'id': 4, 'title': 'Old record', 'date': '2023-05-01'})
        assert event.category == ''
        assert event.coordinator == ''
        assert event.team_members == []
        assert event.media == []
        assert event.total_expenses is None

    def test_from_dict_coerces_form_values(self):
        event = Event.from_dict({
            'id': '7',
            'title': 'Fest',
            'date': '2024-03-01',
            'category': 'Cultural',
            'teamMembers': 'Asha, Vikram ,',
            'participantsCount': '45',
            'totalExpenses': 'n/a',
            'unknownField': True,
        })
        assert event.id == 7
        assert event.team_members == ['Asha', 'Vikram']
        assert event.participants_count == 45
        assert event.total_expenses is None

    def test_from_dict_drops_unreadable_media(self):
        event = Event.from_dict({
            'id': 2, 'title': 't', 'date': '2024-01-01', 'category': 'c',
            'media': [{'type': 'image/png'}, {'type': 'image/png', 'name': 'ok', 'data': 'data:,x'}],
        })
        assert [item.name for item in event.media] == ['ok']

    @pytest.mark.parametrize("raw_id", [None, 'abc', 0, -3])
    def test_from_dict_rejects_bad_id(self, raw_id):
        with pytest.raises(ValidationFailed):
            Event.from_dict({'id': raw_id, 'title': 't'})

class TestEventValidation:
    def test_valid_event_passes(self, make_event):
        event = make_event()
        assert event.validate() is event

    def test_missing_required_fields(self, make_event):
        with pytest.raises(ValidationFailed) as info:
            make_event(title="  ", category="").validate()
        assert info.value.fields == ['title', 'category']

    def test_coordinator_may_be_empty(self, make_event):
        make_event(coordinator="").validate()

    def test_invalid_dates(self, make_event):
        with pytest.raises(ValidationFailed) as info:
            make_event(end_date="next tuesday").validate()
        assert info.value.fields == ['end_date']

class TestDisplayDates:
    def test_display_date(self, make_event):
        assert make_event(date="2024-02-05T09:00:00.000Z").display_date() == "05/02/2024"

    def test_invalid_date_uses_sentinel(self, make_event):
        assert make_event(date="not a date").display_date() == INVALID_DATE

    def test_no_end_date_displays_nothing(self, make_event):
        event = make_event(end_date=None)
        assert event.display_end_date() is None
