"""
Tests for eventrecords.utils.identifiers — id allocation.
"""

from eventrecords.utils.identifiers import next_id

def test_empty_list_starts_at_one():
    assert next_id([]) == 1

def test_one_more_than_maximum(make_event):
    events = [make_event(id=1), make_event(id=5), make_event(id=3)]
    assert next_id(events) == 6

def test_accepts_any_iterable(make_event):
    assert next_id(event for event in [make_event(id=2)]) == 3
