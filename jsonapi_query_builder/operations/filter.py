import logging
from typing import Any

from jsonapi_query_builder.request import FilterQuery, RequestDict

from .base import Operation


logger = logging.getLogger(__name__)


class FilterOperation(Operation):
    """ Filter operation: narrow down the primary data

    Handles: request.filter
    When applied to a query:
    * Attribute filters first: `Resource.apply_attribute()` is called for every one of them
    * Join filters next: `Resource.apply_join()` is called once per relationship,
      with all its dotted keys trimmed and packed into a nested request

    Preload filters (nested objects under a relationship name) are left for the include operation.

    Example:
        {"filter": {"tag": "animals", "author.has_bio": "1", "author.has_image": "1", "comments": {"body": "Great"}}}
        with relationships {"author", "comments"} makes two calls:
        * apply_attribute(query, "tag", "animals")
        * apply_join(query, "author", {"filter": {"has_bio": "1", "has_image": "1"}})
    """
    filter: FilterQuery

    def __init__(self, request: RequestDict, resource):
        super().__init__(request, resource)
        self.filter = FilterQuery.from_request(request.get('filter'))

    __slots__ = 'filter',

    def apply_to_query(self, query: Any) -> Any:
        query = self.apply_attribute_filters(query)
        query = self.apply_join_filters(query)
        return query

    def apply_attribute_filters(self, query: Any) -> Any:
        for key, value in self.filter.attribute_filters(self.resource.relationships):
            logger.debug('Filter "%s" by attribute %r', self.resource.type, key)
            query = self.resource.apply_attribute(query, key, value)
        return query

    def apply_join_filters(self, query: Any) -> Any:
        for relationship, rel_filters in self.filter.join_filters(self.resource.relationships).items():
            logger.debug('Filter "%s" by relationship %r', self.resource.type, relationship)
            query = self.resource.apply_join(query, relationship, RequestDict(filter=rel_filters))
        return query
