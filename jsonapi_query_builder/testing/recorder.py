from __future__ import annotations

from typing import Any

from jsonapi_query_builder.engine import Resource
from jsonapi_query_builder.request import RequestDict, SortingDirection


# A recorded query: the list of calls made to build it
RecordedQuery = tuple[tuple, ...]


class RecordingResource(Resource):
    """ A Resource that records callbacks instead of building a real query

    The query is a tuple of calls: every callback returns a new tuple with one more call at the end.
    Use it to see how a request is interpreted.

    Example:
        articles = RecordingResource('articles', relationships={'author', 'comments'}, fields=('title',))
        articles.build({'filter': {'tag': 'animals'}})
        #-> (('attribute', 'tag', 'animals'), ('fields', ['id', 'title']))
    """

    def new_query(self) -> RecordedQuery:
        return ()

    def apply_attribute(self, query: RecordedQuery, key: str, value: Any) -> RecordedQuery:
        return query + (('attribute', key, value),)

    def apply_join(self, query: RecordedQuery, relationship: str, sub_request: RequestDict) -> RecordedQuery:
        return query + (('join', relationship, sub_request),)

    def apply_include(self, query: RecordedQuery, relationship: str, sub_request: RequestDict) -> RecordedQuery:
        return query + (('include', relationship, sub_request),)

    def apply_fields(self, query: RecordedQuery, fields: list) -> RecordedQuery:
        return query + (('fields', fields),)

    def apply_sort(self, query: RecordedQuery, ordering: list[tuple[SortingDirection, Any]]) -> RecordedQuery:
        return query + (('sort', ordering),)
