"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def parent_child_maps() -> list[dict[str, Any]]:
    """Parent with a collection of children prefixed ``child_``."""
    return [
        {
            "map_id": "Parent",
            "properties": ["name"],
            "collections": [{"name": "children", "map_id": "Child", "column_prefix": "child_"}],
        },
        {"map_id": "Child", "id_property": "id"},
    ]


@pytest.fixture
def blog_maps() -> list[dict[str, Any]]:
    """Three-level schema: blog -> posts -> comments, plus a post author."""
    return [
        {
            "map_id": "Blog",
            "properties": ["title"],
            "collections": [{"name": "posts", "map_id": "Post", "column_prefix": "post_"}],
        },
        {
            "map_id": "Post",
            "properties": ["title"],
            "associations": [{"name": "author", "map_id": "Author", "column_prefix": "author_"}],
            "collections": [{"name": "comments", "map_id": "Comment", "column_prefix": "comment_"}],
        },
        {"map_id": "Author", "properties": ["name"]},
        {"map_id": "Comment", "properties": ["body"]},
    ]


@pytest.fixture
def blog_rows() -> list[dict[str, Any]]:
    """Joined rows for one blog with two posts and three comments."""
    return [
        {
            "id": 1,
            "title": "Engineering",
            "post_id": 10,
            "post_title": "Joins",
            "author_id": 7,
            "author_name": "Ada",
            "comment_id": 100,
            "comment_body": "Nice",
        },
        {
            "id": 1,
            "title": "Engineering",
            "post_id": 10,
            "post_title": "Joins",
            "author_id": 7,
            "author_name": "Ada",
            "comment_id": 101,
            "comment_body": "Thanks",
        },
        {
            "id": 1,
            "title": "Engineering",
            "post_id": 11,
            "post_title": "Indexes",
            "author_id": 8,
            "author_name": "Grace",
            "comment_id": 102,
            "comment_body": "Helpful",
        },
    ]
