import pytest

from mojang_api.models import NameHistoryEntry, ServiceStatus
from mojang_api.result_collections import NameHistoryCollection, ServiceStatusCollection


def statuses(*pairs):
    return ServiceStatusCollection(ServiceStatus(name, status) for name, status in pairs)


class TestServiceStatusCollection:

    def test_keeps_insertion_order(self):
        services = statuses(("b", "red"), ("a", "green"))

        assert [s.name for s in services] == ["b", "a"]
        assert len(services) == services.count() == 2

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            ServiceStatusCollection().add(NameHistoryEntry("Foo"))

    def test_sort_by_name(self):
        services = statuses(("session.minecraft.net", "green"), ("api.mojang.com", "red"), ("Zeta", "green"))

        assert [s.name for s in services.sort_by_name()] == ["Zeta", "api.mojang.com", "session.minecraft.net"]
        assert [s.name for s in services.sort_by_name(descending=True)] == [
            "session.minecraft.net",
            "api.mojang.com",
            "Zeta",
        ]

    def test_sort_by_status_groups_by_priority(self):
        services = statuses(
            ("a", "red"),
            ("b", "yellow"),
            ("c", "green"),
            ("d", "red"),
            ("e", "green"),
        )

        result = [s.status for s in services.sort_by_status()]

        assert result == ["green", "green", "yellow", "red", "red"]

    def test_sort_by_status_is_stable(self):
        services = statuses(("a", "red"), ("b", "green"), ("c", "red"), ("d", "green"))

        assert [s.name for s in services.sort_by_status()] == ["b", "d", "a", "c"]

    def test_descending_reverses_ascending(self):
        pairs = [("a", "red"), ("b", "green"), ("c", "yellow"), ("d", "green"), ("e", "red")]

        ascending = [s.name for s in statuses(*pairs).sort_by_status()]
        descending = [s.name for s in statuses(*pairs).sort_by_status(descending=True)]

        assert descending == list(reversed(ascending))

    def test_status_is_case_insensitive(self):
        services = statuses(("a", "RED"), ("b", "Green"))

        assert [s.name for s in services.sort_by_status()] == ["b", "a"]

    def test_unknown_status_keeps_position(self):
        services = statuses(("a", "red"), ("x", "unknown"), ("b", "green"), ("c", "yellow"))

        assert [s.name for s in services.sort_by_status()] == ["b", "x", "c", "a"]

    def test_sort_returns_collection(self):
        services = statuses(("a", "green"))

        assert services.sort_by_status() is services
        assert services.sort_by_name() is services


class TestNameHistoryCollection:

    def history(self):
        return NameHistoryCollection([
            NameHistoryEntry("Original"),
            NameHistoryEntry("Second", 1414059749),
            NameHistoryEntry("Third", 1500000000),
        ])

    def test_sorts_most_recent_first(self):
        names = [e.name for e in self.history().sort_by_changed_to_at()]

        assert names == ["Third", "Second", "Original"]

    def test_ascending(self):
        names = [e.name for e in self.history().sort_by_changed_to_at(descending=False)]

        assert names == ["Original", "Second", "Third"]

    def test_equal_times_keep_relative_order(self):
        history = NameHistoryCollection([
            NameHistoryEntry("A", 10),
            NameHistoryEntry("B", 20),
            NameHistoryEntry("C", 10),
        ])

        assert [e.name for e in history.sort_by_changed_to_at()] == ["B", "A", "C"]

    def test_sort_never_drops_entries(self):
        history = self.history()
        before = set(history)

        history.sort_by_changed_to_at()

        assert set(history) == before
        assert history.count() == 3

    def test_current(self):
        assert self.history().current().name == "Third"
        assert NameHistoryCollection().current() is None

    def test_from_millis(self):
        assert NameHistoryEntry.from_millis("Foo", None).changed_to_at is None
        assert NameHistoryEntry.from_millis("Foo", 0).changed_to_at == 0
        assert NameHistoryEntry.from_millis("Foo", 1414059749000).changed_to_at == 1414059749
