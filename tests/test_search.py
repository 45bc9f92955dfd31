"""Tests for query execution and ranking."""

import pytest

from bejadict.config import SearchConfig
from bejadict.index.builder import build_index
from bejadict.matching import Candidate, FuzzyMatcher, SubstringMatcher
from bejadict.models import (
    DictionaryEntry,
    EntryKind,
    ReverseEntry,
    SearchDirection,
    SearchResult,
    SecondaryEntry,
    SourceLocator,
    primary_headword,
    primary_target_form,
)
from bejadict.ranking import rank
from bejadict.search import create_strategy, lookup, search

BEJA = SearchDirection.TARGET_LANGUAGE
ENGLISH = SearchDirection.SOURCE_LANGUAGE


def dict_entry(headword, gloss_en=(), parts=(), raw=(), page=1):
    return DictionaryEntry(
        headword=headword,
        headword_parts=tuple(parts),
        gloss_en=tuple(gloss_en),
        gloss_ar=(),
        raw=tuple(raw),
        source=SourceLocator(page=page, line_range=(1, 2)),
    )


def reverse_entry(english, beja=(), raw=(), page=1):
    return ReverseEntry(
        english=english,
        beja=tuple(beja),
        gloss_ar=(),
        raw=tuple(raw),
        source=SourceLocator(page=page, line_range=(3, 3)),
    )


def secondary_entry(headword, gloss_en="", raw="", page=1):
    return SecondaryEntry(headword=headword, gloss_en=gloss_en, raw=raw, source=SourceLocator(page=page))


def beja_headwords(results):
    return [primary_target_form(r) for r in results]


def english_headwords(results):
    return [primary_headword(r) for r in results]


class TestSearch:
    """Tests for the query executor."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    @pytest.mark.parametrize("direction", [BEJA, ENGLISH])
    def test_blank_query_returns_nothing(self, query, direction):
        index = build_index([dict_entry("giraat", ["to run"])], [], [])
        assert search(index, query, direction) == []
        assert lookup(index, query, direction) == []

    def test_empty_index_is_queryable(self):
        index = build_index([], [], [])
        assert len(index) == 0
        assert lookup(index, "giraat", BEJA) == []
        assert lookup(index, "run", ENGLISH) == []

    def test_english_search_matches_glosses_and_raw_lines(self):
        """English search is case-insensitive substring containment."""
        index = build_index(
            [
                dict_entry("giraat", ["To Run"]),
                dict_entry("yam", ["water"], raw=["yam n. water, RUNNING water"]),
                dict_entry("tak", ["man"]),
            ],
            [reverse_entry("run away", ["firi"])],
            [secondary_entry("giiraat", "sprint", raw="giiraat to run")],
        )
        found = {primary_headword(c.result) for c in search(index, "  run ", ENGLISH)}
        assert found == {"giraat", "yam", "run away", "giiraat"}

    def test_english_search_is_not_fuzzy(self):
        index = build_index([dict_entry("giraat", ["to run"])], [], [])
        assert search(index, "rnu", ENGLISH) == []

    def test_english_search_ignores_beja_and_arabic_text(self):
        entry = DictionaryEntry(
            headword="run",
            headword_parts=(),
            gloss_en=("water",),
            gloss_ar=("run",),
            raw=(),
            source=SourceLocator(page=1),
        )
        index = build_index([entry], [], [])
        assert search(index, "run", ENGLISH) == []

    def test_beja_candidates_carry_records_and_scores(self):
        index = build_index([dict_entry("giraat"), dict_entry("giiraat")], [], [])
        candidates = search(index, "giraat", BEJA)
        assert [c.position for c in candidates] == [0, 1]
        assert candidates[0].record.primary == "giraat"
        assert candidates[0].score < candidates[1].score

    def test_candidate_limit(self):
        index = build_index([], [], [secondary_entry(f"giraat {i}") for i in range(100)])
        candidates = search(index, "giraat", BEJA, SearchConfig(candidate_limit=80))
        assert len(candidates) == 80

    def test_create_strategy(self):
        assert isinstance(create_strategy(ENGLISH), SubstringMatcher)
        strategy = create_strategy("beja", SearchConfig(candidate_limit=120))
        assert isinstance(strategy, FuzzyMatcher)
        assert strategy.candidate_limit == 120

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            create_strategy("klingon")


class TestBejaRanking:
    """Ranking of Beja (fuzzy) queries."""

    def test_exact_before_near_and_unrelated_absent(self):
        index = build_index(
            [],
            [],
            [
                secondary_entry("completely-unrelated"),
                secondary_entry("giiraat"),
                secondary_entry("giraat"),
            ],
        )
        assert beja_headwords(lookup(index, "giraat", BEJA)) == ["giraat", "giiraat"]

    def test_apostrophe_divergence(self):
        """Exact spelling wins; an apostrophe-only difference comes next."""
        index = build_index([dict_entry("ba'aa"), dict_entry("baaa")], [], [])
        assert beja_headwords(lookup(index, "baaa", BEJA)) == ["baaa", "ba'aa"]
        assert beja_headwords(lookup(index, "ba’aa", BEJA)) == ["ba'aa", "baaa"]

    def test_prefix_before_near_before_fuzzy(self):
        index = build_index(
            [dict_entry("tagirok"), dict_entry("agir"), dict_entry("giraat")], [], []
        )
        assert beja_headwords(lookup(index, "gir", BEJA)) == ["giraat", "agir", "tagirok"]

    def test_diacritics_ignored(self):
        index = build_index([dict_entry("gíráat")], [], [])
        assert beja_headwords(lookup(index, "giraat", BEJA)) == ["gíráat"]

    def test_alternate_forms_are_searchable(self):
        index = build_index([dict_entry("giraat", parts=["tigirit"])], [], [])
        assert beja_headwords(lookup(index, "tigirit", BEJA)) == ["giraat"]

    def test_cross_source_merge(self):
        """Matches from every dataset are returned with their own tag."""
        index = build_index(
            [dict_entry("giraat", ["to run"])],
            [reverse_entry("run", ["giraat", "giiraat"])],
            [secondary_entry("giiraat", "running")],
        )
        results = lookup(index, "giraat", BEJA)
        assert [r.kind for r in results] == [EntryKind.DICTIONARY, EntryKind.REVERSE, EntryKind.SECONDARY]

    def test_result_cap(self):
        index = build_index([], [], [secondary_entry(f"giraat {i}") for i in range(100)])
        assert len(lookup(index, "giraat", BEJA)) == 60
        assert len(lookup(index, "giraat", BEJA, SearchConfig(fuzzy_result_limit=10))) == 10

    def test_deterministic(self):
        index = build_index(
            [dict_entry("giraat"), dict_entry("giiraat"), dict_entry("gira")],
            [reverse_entry("run", ["giraat"])],
            [secondary_entry("giraat")],
        )
        candidates = search(index, "giraat", BEJA)
        assert rank(candidates, "giraat", BEJA) == rank(list(reversed(candidates)), "giraat", BEJA)

    def test_rank_without_index_records(self):
        """Candidates built by hand are normalized on the fly."""
        candidates = [
            Candidate(result=SearchResult(EntryKind.SECONDARY, secondary_entry("giiraat")), position=0),
            Candidate(result=SearchResult(EntryKind.SECONDARY, secondary_entry("giraat")), position=1),
        ]
        assert beja_headwords(rank(candidates, "giraat", BEJA)) == ["giraat", "giiraat"]


class TestEnglishRanking:
    """Ranking of English (substring) queries."""

    def test_tier_order(self):
        index = build_index(
            [
                dict_entry("c", ["the act of running"]),
                dict_entry("b", ["running fast"]),
                dict_entry("a", ["to run"]),
            ],
            [],
            [],
        )
        results = lookup(index, "run", ENGLISH)
        assert english_headwords(results) == ["a", "b", "c"]

    def test_raw_line_match_ranks_below_gloss_match(self):
        index = build_index(
            [dict_entry("a", ["sprint"], raw=["a v. sprint, run quickly"]), dict_entry("b", ["outrun"])],
            [],
            [],
        )
        assert english_headwords(lookup(index, "run", ENGLISH)) == ["b", "a"]

    def test_shorter_gloss_then_headword(self):
        index = build_index(
            [dict_entry("zaa", ["running water"]), dict_entry("Baa", ["runner"]), dict_entry("aab", ["runner"])],
            [],
            [],
        )
        assert english_headwords(lookup(index, "run", ENGLISH)) == ["aab", "Baa", "zaa"]

    def test_cross_source_merge(self):
        index = build_index(
            [dict_entry("giraat", ["to run"])],
            [reverse_entry("run", ["giraat"])],
            [secondary_entry("giiraat", "running")],
        )
        results = lookup(index, "run", ENGLISH)
        assert [r.kind for r in results] == [EntryKind.REVERSE, EntryKind.DICTIONARY, EntryKind.SECONDARY]

    def test_source_result_limit(self):
        index = build_index([dict_entry(f"w{i}", ["run"]) for i in range(40)], [], [])
        assert len(lookup(index, "run", ENGLISH)) == 40
        assert len(lookup(index, "run", ENGLISH, SearchConfig(source_result_limit=30))) == 30

    def test_deterministic(self):
        index = build_index([dict_entry("b", ["run"]), dict_entry("a", ["run"])], [], [])
        candidates = search(index, "run", ENGLISH)
        assert rank(candidates, "run", ENGLISH) == rank(candidates[::-1], "run", ENGLISH)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
