"""
Unit tests для ArticleStatus.
"""

import pytest

from blogify.domain.value_objects.article_status import ArticleStatus


def test_author_selectable_statuses():
    assert ArticleStatus.author_selectable() == (ArticleStatus.DRAFT, ArticleStatus.PENDING)
    assert ArticleStatus.DRAFT.is_initial()
    assert ArticleStatus.PENDING.is_initial()
    for status in (ArticleStatus.APPROVED, ArticleStatus.REJECTED, ArticleStatus.HIDDEN):
        assert not status.is_initial()


def test_only_approved_is_public():
    assert [s for s in ArticleStatus if s.is_public()] == [ArticleStatus.APPROVED]


@pytest.mark.parametrize(
    "current,new,allowed",
    [
        (ArticleStatus.DRAFT, ArticleStatus.PENDING, True),
        (ArticleStatus.DRAFT, ArticleStatus.APPROVED, False),
        (ArticleStatus.PENDING, ArticleStatus.APPROVED, True),
        (ArticleStatus.PENDING, ArticleStatus.REJECTED, True),
        (ArticleStatus.APPROVED, ArticleStatus.HIDDEN, True),
        (ArticleStatus.HIDDEN, ArticleStatus.APPROVED, True),
        (ArticleStatus.REJECTED, ArticleStatus.PENDING, True),
        (ArticleStatus.REJECTED, ArticleStatus.APPROVED, False),
    ],
)
def test_transitions(current, new, allowed):
    assert current.can_transition_to(new) is allowed


def test_every_status_has_label_and_color():
    for status in ArticleStatus:
        assert status.tab_label
        assert status.badge_color

    assert ArticleStatus.APPROVED.tab_label == "Published"
    assert ArticleStatus.DRAFT.badge_color == "blue"
