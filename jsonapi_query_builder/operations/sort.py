from collections import abc
from typing import Any

from jsonapi_query_builder.request import SortQuery, SortingDirection, RequestDict
from jsonapi_query_builder.typing import FieldIdentifier

from .base import Operation


class SortOperation(Operation):
    """ Sort operation: define the ordering of result rows

    Handles: request.sort
    When applied to a query:
    * Calls `Resource.apply_sort()` once with the whole ordering: (direction, field) pairs, the primary sort key first
    """
    sort: SortQuery

    def __init__(self, request: RequestDict, resource):
        super().__init__(request, resource)
        self.sort = SortQuery.from_request(request.get('sort'))

    __slots__ = 'sort',

    def apply_to_query(self, query: Any) -> Any:
        # Nothing to sort by
        if not self.sort.fields:
            return query

        return self.resource.apply_sort(query, list(self.compile_ordering()))

    def compile_ordering(self) -> abc.Iterator[tuple[SortingDirection, FieldIdentifier]]:
        """ Generate (direction, field) pairs to sort by """
        for field in self.sort.fields:
            yield field.direction, self.resource.map_field(field.name)
