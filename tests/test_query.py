"""Tests for filtering, sorting and limiting news entries."""

import pytest

from promising_news.errors import ValidationError
from promising_news.models import NewsEntry
from promising_news.query import NewsQuery, run_query


def titles(entries):
    return [entry.title for entry in entries]


class TestNewsQueryFromArgs:
    def test_defaults(self):
        query = NewsQuery.from_args({}, today="2024-01-31")
        assert query.sort_by == "date"
        assert query.sort_order == "asc"
        assert query.keyword == ""
        assert query.start_date == "2022-01-01"
        assert query.end_date == "2024-01-31"
        assert query.max_results == 100

    def test_empty_values_fall_back_to_defaults(self):
        query = NewsQuery.from_args({"sortBy": "", "maxResults": "", "keyword": ""}, today="2024-01-31")
        assert query.sort_by == "date"
        assert query.max_results == 100

    def test_keyword_is_lowercased(self):
        query = NewsQuery.from_args({"keyword": "RiVeR"})
        assert query.keyword == "river"

    def test_end_date_defaults_to_today(self):
        query = NewsQuery.from_args({})
        assert len(query.end_date) == 10
        assert query.end_date >= "2022-01-01"

    @pytest.mark.parametrize("value", ["abc", "0", "-3", "1.5"])
    def test_invalid_max_results(self, value):
        with pytest.raises(ValidationError):
            NewsQuery.from_args({"maxResults": value})


class TestRunQuery:
    def test_empty_keyword_matches_everything_in_range(self, entries):
        query = NewsQuery(end_date="2030-01-01")
        assert len(run_query(entries, query)) == 3

    def test_date_range_is_inclusive(self, entries):
        query = NewsQuery(start_date="2022-03-15", end_date="2022-06-01")
        assert titles(run_query(entries, query)) == [
            "Local library opens new wing",
            "Volunteers restore river park",
        ]

    def test_date_range_excludes_outside(self, entries):
        query = NewsQuery(start_date="2022-03-16", end_date="2022-05-31")
        assert run_query(entries, query) == []

    def test_keyword_searches_title_author_publication_description(self, entries):
        by_author = run_query(entries, NewsQuery(keyword="sam lee", end_date="2030-01-01"))
        by_publication = run_query(entries, NewsQuery(keyword="GREEN", end_date="2030-01-01"))
        by_description = run_query(entries, NewsQuery(keyword="sourdough", end_date="2030-01-01"))
        assert titles(by_author) == ["Bakery wins regional award"]
        assert titles(by_publication) == ["Volunteers restore river park"]
        assert titles(by_description) == ["Bakery wins regional award"]

    def test_keyword_does_not_match_url(self, entries):
        assert run_query(entries, NewsQuery(keyword="example.com", end_date="2030-01-01")) == []

    def test_sort_by_title_desc(self, entries):
        query = NewsQuery(sort_by="title", sort_order="desc", end_date="2030-01-01")
        assert titles(run_query(entries, query)) == [
            "Volunteers restore river park",
            "Local library opens new wing",
            "Bakery wins regional award",
        ]

    def test_sort_by_publication_puts_missing_first_ascending(self, entries):
        query = NewsQuery(sort_by="publication", end_date="2030-01-01")
        assert [entry.publication for entry in run_query(entries, query)] == [
            None,
            "City Herald",
            "Green Times",
        ]

    def test_positivity_asc_and_desc_are_reversed(self, entries):
        asc = run_query(entries, NewsQuery(sort_by="positivity_score", sort_order="asc", end_date="2030-01-01"))
        desc = run_query(entries, NewsQuery(sort_by="positivity_score", sort_order="desc", end_date="2030-01-01"))
        assert [entry.positivity_score for entry in asc] == [0.55, 0.7, 0.9]
        assert titles(desc) == list(reversed(titles(asc)))

    def test_unknown_sort_field_keeps_store_order(self, entries):
        query = NewsQuery(sort_by="author", end_date="2030-01-01")
        assert titles(run_query(entries, query)) == titles(entries)

    @pytest.mark.parametrize("limit,expected", [(1, 1), (2, 2), (3, 3), (10, 3)])
    def test_max_results(self, entries, limit, expected):
        query = NewsQuery(max_results=limit, end_date="2030-01-01")
        assert len(run_query(entries, query)) == expected

    def test_highest_positivity_example(self):
        entries = [
            NewsEntry(title="A", date="2022-01-01", positivity_score=0.2),
            NewsEntry(title="B", date="2022-06-01", positivity_score=0.9),
        ]
        query = NewsQuery(sort_by="positivity_score", sort_order="desc", max_results=1, end_date="2030-01-01")
        assert titles(run_query(entries, query)) == ["B"]

    def test_entry_without_date_is_excluded(self):
        entries = [NewsEntry(title="No date", date=None)]
        assert run_query(entries, NewsQuery(end_date="2030-01-01")) == []


def test_empty_title_matches_empty_keyword():
    entries = [NewsEntry(title="", date="2022-05-05T00:00:00.000Z")]
    assert len(run_query(entries, NewsQuery(end_date="2030-01-01"))) == 1
