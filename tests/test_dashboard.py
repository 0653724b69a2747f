"""
Tests for eventrecords.utils.dashboard — counts and search.
"""

from eventrecords.utils import dashboard
from eventrecords.taxonomy import TaxonomyRegistry
from eventrecords.utils.dashboard import category_counts, search_events

class TestCategoryCounts:
    def test_counts_registry_and_event_categories(self, make_event):
        events = [
            make_event(id=1, category="Technical"),
            make_event(id=2, category="Technical"),
            make_event(id=3, category="Workshop Series"),
            make_event(id=4, category="Other"),
            make_event(id=5, category=""),
        ]
        summary = category_counts(events, TaxonomyRegistry())
        assert summary['total'] == 5
        assert summary['categories'] == [
            {'name': 'Technical', 'count': 2},
            {'name': 'Cultural', 'count': 0},
            {'name': 'Sports', 'count': 0},
            {'name': 'Workshop Series', 'count': 1},
        ]

    def test_excluded_category_is_the_catch_all_category(self, make_event, monkeypatch):
        monkeypatch.setattr(dashboard, "CATCH_ALL_CATEGORY", "Misc")
        registry = TaxonomyRegistry({"Technical": [], "Other": [], "Misc": []})
        names = [entry["name"] for entry in category_counts([make_event(category="Misc")], registry)["categories"]]
        assert names == ["Technical", "Other"]

    def test_runtime_categories_are_listed(self):
        registry = TaxonomyRegistry()
        registry.add_category("Seminar")
        names = [entry['name'] for entry in category_counts([], registry)['categories']]
        assert names[-1] == "Seminar"

class TestSearch:
    def test_matches_any_text_field(self, make_event):
        events = [
            make_event(id=1, title="Robotics Expo", description=None),
            make_event(id=2, title="Dance Night", venue="Open Air Theatre", description=None),
        ]
        assert [e.id for e in search_events(events, "robot")] == [1]
        assert [e.id for e in search_events(events, "THEATRE")] == [2]

    def test_category_filter(self, make_event):
        events = [make_event(id=1, category="Sports"), make_event(id=2, category="Technical")]
        assert [e.id for e in search_events(events, "", "Sports")] == [1]

    def test_empty_query_returns_all(self, make_event):
        events = [make_event(id=1), make_event(id=2)]
        assert search_events(events) == events
