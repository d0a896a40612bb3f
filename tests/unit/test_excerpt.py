"""
Unit tests для синтеза анонса.
"""

from blogify.domain.services.excerpt import EXCERPT_LENGTH, EXCERPT_MARKER, derive_excerpt, resolve_excerpt


def test_long_body_is_truncated():
    body = "".join(chr(ord("a") + i % 26) for i in range(500))

    excerpt = derive_excerpt(body)

    assert excerpt == body[:200] + "..."
    assert len(excerpt) == EXCERPT_LENGTH + len(EXCERPT_MARKER)


def test_short_body_still_gets_marker():
    assert derive_excerpt("Short body") == "Short body..."


def test_authored_excerpt_is_kept():
    assert resolve_excerpt("My summary", "x" * 500) == "My summary"


def test_empty_excerpt_is_derived():
    assert resolve_excerpt("", "Body text") == "Body text..."
    assert resolve_excerpt(None, "Body text") == "Body text..."
