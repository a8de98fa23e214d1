"""Tests for table name to class name conversion."""

import pytest

from factorygen.core.naming import camel, factory_name, model_name, singular


@pytest.mark.parametrize("table, expected", [
    ("users", "Users"),
    ("user_posts", "UserPosts"),
    ("user-posts", "UserPosts"),
    ("user posts", "UserPosts"),
    ("UserPosts", "UserPosts"),
])
def test_camel(table, expected):
    assert camel(table) == expected


@pytest.mark.parametrize("name, expected", [
    ("Users", "User"),
    ("UserPosts", "UserPost"),
    ("Categories", "Category"),
    ("Statuses", "Status"),
    ("User", "User"),
])
def test_singular(name, expected):
    assert singular(name) == expected


@pytest.mark.parametrize("table, model, factory", [
    ("users", "Users", "UserFactory"),
    ("posts", "Posts", "PostFactory"),
    ("blog_posts", "BlogPosts", "BlogPostFactory"),
    ("categories", "Categories", "CategoryFactory"),
])
def test_model_and_factory_names(table, model, factory):
    assert model_name(table) == model
    assert factory_name(table) == factory
