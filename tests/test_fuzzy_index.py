"""Tests for the approximate-match index."""

import pytest

from bejadict.index.fuzzy_index import FuzzyIndex


def create_index(docs, fields=(("primary", 0.75), ("blob", 0.25)), **kwargs):
    """Build an index over a list of field dicts."""
    index = FuzzyIndex(fields=list(fields), **kwargs)
    for doc in docs:
        index.add(doc)
    return index


class TestFuzzyIndex:
    """Tests for FuzzyIndex.search()."""

    def test_exact_substring_scores_zero(self):
        """A pattern contained in every field is a perfect hit."""
        index = create_index([{"primary": "tak giraat", "blob": "tak giraat"}])
        hits = index.search("giraat")
        assert len(hits) == 1
        assert hits[0].doc_id == 0
        assert hits[0].score == pytest.approx(0.0)

    def test_single_edit_variant_surfaces(self):
        """A doubled vowel is within the edit budget."""
        index = create_index([{"primary": "giiraat"}])
        hits = index.search("giraat")
        assert [h.doc_id for h in hits] == [0]
        assert hits[0].field_scores["primary"] == pytest.approx(1 / 6)

    def test_unrelated_word_is_absent(self):
        """Distant words do not clear the threshold."""
        index = create_index([{"primary": "completely unrelated"}, {"primary": "giraat"}])
        assert [h.doc_id for h in index.search("giraat")] == [1]

    def test_field_weights_order_hits(self):
        """A primary-field hit beats a hit in a low-weight field."""
        index = create_index([
            {"primary": "xyz", "blob": "giraat"},
            {"primary": "giraat", "blob": ""},
        ])
        hits = index.search("giraat")
        assert [h.doc_id for h in hits] == [1, 0]
        assert hits[0].score == pytest.approx(0.25)
        assert hits[1].score == pytest.approx(0.75)

    def test_ties_keep_insertion_order(self):
        """Equal scores fall back to document order."""
        index = create_index([{"primary": "giraat b"}, {"primary": "a giraat"}])
        assert [h.doc_id for h in index.search("giraat")] == [0, 1]

    def test_limit(self):
        """Only the best `limit` hits are returned."""
        index = create_index([{"primary": f"giraat{i}"} for i in range(10)])
        assert len(index.search("giraat", limit=3)) == 3
        assert len(index.search("giraat")) == 10

    def test_pattern_shorter_than_min_match_length(self):
        """Single-character patterns match nothing."""
        index = create_index([{"primary": "a"}])
        assert index.search("a") == []

    def test_empty_index(self):
        """Searching an empty index is valid."""
        assert create_index([]).search("giraat") == []

    def test_short_pattern_needs_exact_substring(self):
        """Three-character patterns get no edit budget."""
        index = create_index([{"primary": "gar"}, {"primary": "agir"}])
        assert [h.doc_id for h in index.search("gir")] == [1]


class TestFuzzyIndexSettings:
    """Tests for index construction and edit budgets."""

    @pytest.mark.parametrize("length, expected", [(2, 0), (3, 0), (4, 1), (6, 1), (7, 2), (100, 33)])
    def test_max_edits(self, length, expected):
        index = FuzzyIndex(fields=[("primary", 1.0)], threshold=0.33)
        assert index.max_edits(length) == expected

    def test_weights_are_normalized(self):
        index = FuzzyIndex(fields=[("a", 3.0), ("b", 1.0)])
        assert [f.weight for f in index.fields] == [0.75, 0.25]

    def test_zero_weights_rejected(self):
        with pytest.raises(ValueError):
            FuzzyIndex(fields=[("a", 0.0)])

    def test_loose_threshold_scans_every_document(self):
        """When the bigram filter gives no guarantee all documents are scored."""
        index = create_index([{"primary": "xyzw"}], fields=(("primary", 1.0),), threshold=1.0)
        assert [h.doc_id for h in index.search("abcd")] == [0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
