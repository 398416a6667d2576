"""Unit tests for related-content ranking."""

from __future__ import annotations

from collections.abc import Callable

from app.content.models import ContentItem, ContentType
from app.content.ranking import RelatedContentRanker

MakeItem = Callable[..., ContentItem]


def test_tag_overlap_ranks_first(make_item: MakeItem) -> None:
    """Test that the item sharing the most tags wins."""
    source = make_item("paris", tags=["europe", "city", "food"])
    rome = make_item("rome", tags=["europe", "city"], date="2024-01-01")
    berlin = make_item("berlin", tags=["europe"], date="2024-06-01")
    tokyo = make_item("tokyo", tags=["asia"], date="2024-07-01")

    ranked = RelatedContentRanker().rank(source, [tokyo, berlin, rome], limit=2)

    assert [item.slug for item in ranked] == ["rome", "berlin"]


def test_tags_outrank_keywords(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"], keywords=["museums", "cafes", "art"])
    keyword_match = make_item("vienna", keywords=["museums", "cafes", "art"])
    tag_match = make_item("madrid", tags=["Europe"])

    ranked = RelatedContentRanker().rank(source, [keyword_match, tag_match], limit=2)

    assert [item.slug for item in ranked] == ["madrid", "vienna"]


def test_category_counts_as_term(make_item: MakeItem) -> None:
    source = make_item("paris", category="City")
    same_category = make_item("rome", category="city", date="2020-01-01")
    newer = make_item("oslo", date="2024-01-01")

    ranked = RelatedContentRanker().rank(source, [newer, same_category], limit=1)

    assert [item.slug for item in ranked] == ["rome"]


def test_ties_break_by_date_then_slug(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])
    older = make_item("athens", tags=["europe"], date="2023-01-01")
    newer_b = make_item("zagreb", tags=["europe"], date="2024-01-01")
    newer_a = make_item("bern", tags=["europe"], date="2024-01-01")

    ranked = RelatedContentRanker().rank(source, [older, newer_b, newer_a], limit=3)

    assert [item.slug for item in ranked] == ["bern", "zagreb", "athens"]


def test_source_item_excluded(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])

    ranked = RelatedContentRanker().rank(source, [source, make_item("rome")], limit=3)

    assert [item.slug for item in ranked] == ["rome"]


def test_same_slug_of_other_type_is_not_the_source(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])
    post = make_item("paris", content_type=ContentType.BLOG, tags=["europe"])

    ranked = RelatedContentRanker().rank(source, [post], limit=3)

    assert ranked == [post]


def test_other_verticals_excluded_shared_included(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])
    other_vertical = make_item("monaco", vertical="luxury", tags=["europe"])
    shared = make_item("lisbon", vertical="all", tags=["europe"])

    ranked = RelatedContentRanker().rank(source, [other_vertical, shared], limit=3)

    assert [item.slug for item in ranked] == ["lisbon"]


def test_padding_with_newest_when_few_overlap(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])
    match = make_item("rome", tags=["europe"], date="2020-01-01")
    newest = make_item("lima", date="2024-05-01")
    older = make_item("quito", date="2023-05-01")
    undated = make_item("cusco")

    ranked = RelatedContentRanker().rank(source, [undated, older, newest, match], limit=3)

    assert [item.slug for item in ranked] == ["rome", "lima", "quito"]


def test_limit_bounds(make_item: MakeItem) -> None:
    source = make_item("paris")
    candidates = [make_item("rome"), make_item("oslo")]
    ranker = RelatedContentRanker()

    assert ranker.rank(source, candidates, limit=0) == []
    assert len(ranker.rank(source, candidates, limit=10)) == 2


def test_ranking_is_deterministic(make_item: MakeItem) -> None:
    source = make_item("paris", tags=["europe"])
    candidates = [make_item(f"city-{index}", tags=["europe"]) for index in range(5)]
    ranker = RelatedContentRanker()

    first = ranker.rank(source, candidates, limit=3)
    second = ranker.rank(source, list(reversed(candidates)), limit=3)

    assert first == second


def test_budget_blog_posts_related_by_shared_tag(make_item: MakeItem) -> None:
    """Test that a Paris post recommends the Rome post through the shared europe tag."""
    paris = make_item("paris-on-a-budget", content_type=ContentType.BLOG, tags=["paris", "europe"])
    rome = make_item("rome-on-a-budget", content_type=ContentType.BLOG, tags=["rome", "europe"])
    lima = make_item("lima-on-a-budget", content_type=ContentType.BLOG, tags=["peru"])

    ranked = RelatedContentRanker().rank(paris, [paris, lima, rome], limit=1)

    assert ranked == [rome]


def test_same_type_and_slug_in_other_vertical_is_not_related(make_item: MakeItem) -> None:
    source = make_item("lisbon", vertical="luxury", tags=["europe"])
    shared = make_item("lisbon", vertical="all", tags=["europe"])
    bali = make_item("bali", vertical="luxury")

    ranked = RelatedContentRanker().rank(source, [shared, bali], limit=3)

    assert ranked == [bali]
