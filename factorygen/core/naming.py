"""Identifier helpers for turning table names into class names.

Singularization follows the ``inflection`` library's English rules; irregular
plurals it does not know (``data``, ``criteria``) come back unchanged or wrong.
"""

import re

import inflection


def camel(table_name: str) -> str:
    """``user_posts`` / ``user-posts`` / ``user posts`` -> ``UserPosts``."""
    return inflection.camelize(re.sub(r"[-\s]+", "_", table_name.strip()))


def singular(name: str) -> str:
    return inflection.singularize(name)


def model_name(table_name: str) -> str:
    """Plural-preserving model name for a table, e.g. ``UserPosts``."""
    return camel(table_name)


def factory_name(table_name: str) -> str:
    """Factory class and file name for a table, e.g. ``UserPostFactory``."""
    return singular(model_name(table_name)) + "Factory"
