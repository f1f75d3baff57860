import logging
from collections import abc
from typing import Any

from jsonapi_query_builder.request import IncludeQuery, FilterQuery, RequestDict, related_request

from .base import Operation


logger = logging.getLogger(__name__)


class IncludeOperation(Operation):
    """ Include operation: add related resources

    Handles: request.include, and preload filters from request.filter
    When applied to a query:
    * Calls `Resource.apply_include()` once for every included relationship with a request of its own:
      "include" gets the remaining paths, "filter" gets the preload filter, "fields" is passed as is

    A preload filter only works together with "include":
    `{"include": "author", "filter": {"author": {"has_bio": "1"}}}` loads the author only if they have a bio.
    Without "include=author" the preload filter has no effect.
    """
    include: IncludeQuery

    # The "filter" parameter: preload filters live there
    filter: FilterQuery

    # Requests for included relationships: { relationship => request }
    related: dict[str, RequestDict]

    def __init__(self, request: RequestDict, resource):
        super().__init__(request, resource)
        self.include = IncludeQuery.from_request(request.get('include'))
        self.filter = FilterQuery.from_request(request.get('filter'))

        # Prepare related requests now: malformed preload filters fail before the query is touched
        self.related = dict(self.related_requests())

    __slots__ = 'include', 'filter', 'related'

    def apply_to_query(self, query: Any) -> Any:
        self._report_ignored_preload_filters()

        for relationship, sub_request in self.related.items():
            logger.debug('Include "%s" relationship %r', self.resource.type, relationship)
            query = self.resource.apply_include(query, relationship, sub_request)

        return query

    def related_requests(self) -> abc.Iterator[tuple[str, RequestDict]]:
        """ Generate (relationship, request) pairs for every included relationship """
        # No "include" at all
        if self.include.relations is None:
            return

        for relationship, related_includes in self.include.relations.items():
            yield relationship, related_request(self.request, relationship, related_includes, self.filter)

    def _report_ignored_preload_filters(self):
        """ Log preload filters that have no effect because their relationship is not included """
        for relationship in self.filter.preload_filter_names(self.resource.relationships):
            if relationship not in self.include:
                logger.debug('Preload filter for "%s" relationship %r ignored: not included', self.resource.type, relationship)
