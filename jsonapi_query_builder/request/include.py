""" Request: the "include" parameter """

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jsonapi_query_builder import exc

from .filter import FilterQuery
from .paths import group_paths, join_grouped_paths
from .request import RequestDict


@dataclass
class IncludeQuery:
    """ Request parameter: "include"

    Example:
        "author,comments.author" is grouped into {"author": "", "comments": "author"}
    """
    # Included relationships: { relationship name => comma-separated paths to include on the next level }
    # None if the parameter was not given at all
    relations: Optional[dict[str, str]]

    __slots__ = 'relations',

    @classmethod
    def from_request(cls, include: Optional[str]) -> IncludeQuery:
        # Absent
        if include is None:
            return cls(relations=None)

        # Check types
        if not isinstance(include, str):
            raise exc.ShapeError('"include" must be a comma-separated string')

        # Construct
        return cls(relations=group_paths(include))

    def export(self) -> Optional[str]:
        if self.relations is None:
            return None
        return join_grouped_paths(self.relations)

    def __contains__(self, relationship: str):
        """ Check if a relationship is included """
        return self.relations is not None and relationship in self.relations


def related_request(request: RequestDict, relationship: str, related_includes: str, filter: Optional[FilterQuery] = None) -> RequestDict:
    """ Make a request for an included relationship

    Args:
        request: The parent request
        relationship: The included relationship
        related_includes: Paths to include on the next level
        filter: The parent request's "filter", if already parsed

    Returns:
        A request where:
        * "include" is the remainder of the include paths
        * "filter" is the preload filter: `request.filter[relationship]`, if it is an object
        * "fields" is the parent's sparse fieldsets object, as is
    """
    if filter is None:
        filter = FilterQuery.from_request(request.get('filter'))

    return RequestDict(
        include=related_includes,
        filter=filter.preload_filter(relationship),
        fields=request.get('fields'),
    )
