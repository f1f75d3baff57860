""" Request: the "filter" parameter

There are three kinds of filter keys:

* Attribute filters use a plain field name: `{"tag": "animals"}`.
  They filter the primary data directly.
* Join filters use a dotted notation: `{"author.has_bio": "1"}`.
  They filter the primary data through a relationship, typically with an inner join.
* Preload filters use an exact relationship name with a nested object: `{"comments": {"body": "Great"}}`.
  They only filter the related rows loaded with "include"; the primary data is not affected.
"""

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from jsonapi_query_builder import exc

from .paths import first_segment


class FilterKind(Enum):
    ATTRIBUTE = 'attribute'
    JOIN = 'join'
    PRELOAD = 'preload'


def is_join_filter(relationships: abc.Iterable[str], key: str) -> bool:
    """ Test if the given key is a join filter

    Example:
        is_join_filter({'articles', 'comments'}, 'articles.comments.user') #-> True
        is_join_filter({'articles', 'comments'}, 'comments') #-> False
        is_join_filter({'articles', 'comments'}, 'email') #-> False
    """
    return any(
        key.startswith(relationship + '.')
        for relationship in relationships
    )


def is_preload_filter(relationships: abc.Collection[str], key: str) -> bool:
    """ Test if the given key is a preload filter

    Example:
        is_preload_filter({'articles', 'comments'}, 'articles.comments.user') #-> False
        is_preload_filter({'articles', 'comments'}, 'comments') #-> True
        is_preload_filter({'articles', 'comments'}, 'email') #-> False
    """
    return key in relationships


def is_relationship_filter(relationships: abc.Collection[str], key: str) -> bool:
    """ Test if the given key is either a join filter or a preload filter """
    return is_join_filter(relationships, key) or is_preload_filter(relationships, key)


def classify_filter(relationships: abc.Collection[str], key: str) -> FilterKind:
    """ Tell which kind of filter the key is """
    if is_join_filter(relationships, key):
        return FilterKind.JOIN
    elif is_preload_filter(relationships, key):
        return FilterKind.PRELOAD
    else:
        return FilterKind.ATTRIBUTE


def trim_leading_relationship_from_keys(relation: str, rel_filters: abc.Iterable[tuple[str, Any]]) -> tuple[str, dict[str, Any]]:
    """ Remove the leading path segment from the keys after grouping has been applied

    Example:
        trim_leading_relationship_from_keys('article', [('article.tag', 'animals'), ('article.comments.user.name', 'joe')])
        #-> ('article', {'tag': 'animals', 'comments.user.name': 'joe'})
    """
    # The prefix is removed once: "a.a.x" under "a" becomes "a.x", not "x".
    # The next level sees a relationship "a" of its own.
    prefix = relation + '.'
    return relation, {
        key[len(prefix):] if key.startswith(prefix) else key: value
        for key, value in rel_filters
    }


# Values that a preload filter may carry besides a nested object
SCALAR_TYPES = (str, int, float, bool)


@dataclass
class FilterQuery:
    """ Request parameter: "filter"

    Keeps the conditions as given; classification depends on the resource's relationships,
    so it's done on demand.
    """
    # Filter conditions: { key => value }, in request order
    conditions: dict[str, Any]

    __slots__ = 'conditions',

    @classmethod
    def from_request(cls, filter: Optional[abc.Mapping[str, Any]]) -> FilterQuery:
        # Empty
        if filter is None:
            return cls(conditions={})

        # Check types
        if not isinstance(filter, abc.Mapping):
            raise exc.ShapeError('"filter" must be an object')
        for key in filter:
            if not isinstance(key, str):
                raise exc.ShapeError(f'"filter" keys must be strings, {key!r} given')

        # Construct
        return cls(conditions=dict(filter))

    def export(self) -> dict[str, Any]:
        return dict(self.conditions)

    def attribute_filters(self, relationships: abc.Collection[str]) -> list[tuple[str, Any]]:
        """ Get the filters that apply to the primary data directly """
        return [
            (key, value)
            for key, value in self.conditions.items()
            if not is_relationship_filter(relationships, key)
        ]

    def join_filters(self, relationships: abc.Collection[str]) -> dict[str, dict[str, Any]]:
        """ Get join filters, grouped by relationship

        Returns:
            { relationship name => { remaining path => value } }
            Groups are ordered by the first appearance of the relationship.
        """
        groups: dict[str, list[tuple[str, Any]]] = {}
        for key, value in self.conditions.items():
            if is_join_filter(relationships, key):
                groups.setdefault(first_segment(key), []).append((key, value))

        return dict(
            trim_leading_relationship_from_keys(relation, rel_filters)
            for relation, rel_filters in groups.items()
        )

    def preload_filter(self, relationship: str) -> dict[str, Any]:
        """ Get the nested filter object for an included relationship

        Returns:
            The nested object, or an empty dict if there's none

        Raises:
            exc.ShapeError: the value is neither an object nor a scalar
        """
        value = self.conditions.get(relationship)

        if isinstance(value, abc.Mapping):
            return dict(value)
        elif value is None or isinstance(value, SCALAR_TYPES):
            return {}
        else:
            raise exc.ShapeError(f'"filter[{relationship}]" must be an object')

    def preload_filter_names(self, relationships: abc.Collection[str]) -> list[str]:
        """ Get the names of relationships that have a preload filter """
        return [
            key
            for key in self.conditions
            if classify_filter(relationships, key) == FilterKind.PRELOAD
        ]
