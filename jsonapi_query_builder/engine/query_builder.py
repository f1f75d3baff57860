""" QueryBuilder: an object that binds operations together to build a query from a JSON-API request """

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Optional, TYPE_CHECKING

from jsonapi_query_builder import operations
from jsonapi_query_builder.request import RequestDict, ensure_request


if TYPE_CHECKING:
    from .resource import Resource


logger = logging.getLogger(__name__)


class QueryBuilder:
    """ Query Builder: applies operations from a JSON-API request to a query

    It starts a fresh query using the Resource, and lets every operation modify it:
    filter, fields, sort, include -- in this exact order:

    * filter goes first: it narrows the primary data and may join other tables using full rows
    * fields goes next: it restricts the selected fields, but always keeps the primary key
    * sort orders the primary data before anything nested is attached
    * include goes last: associating related rows with their parents relies on the primary key kept by "fields"

    Example:
        builder = QueryBuilder({'filter': {'tag': 'animals'}, 'sort': '-published'}, articles)
        query = builder.build()
    """
    # The request to build a query from
    request: RequestDict

    # The resource to build the query for: configuration and callbacks
    resource: Resource

    def __init__(self, request: Optional[RequestDict], resource: Resource):
        """ Prepare to build a query with this request for the target resource

        All request parameters are parsed right away: malformed input fails before the query is touched.

        Args:
            request: The JSON-API request, parsed into a dict
            resource: The resource to build the query for

        Raises:
            exc.ShapeError: malformed request
        """
        self.request = ensure_request(request)
        self.resource = resource

        # Init operations
        self.filter_op = self.FilterOperation(self.request, resource)
        self.fields_op = self.FieldsOperation(self.request, resource)
        self.sort_op = self.SortOperation(self.request, resource)
        self.include_op = self.IncludeOperation(self.request, resource)

    __slots__ = (
        'request', 'resource',
        'filter_op', 'fields_op', 'sort_op', 'include_op',
    )

    @classmethod
    def prepare(cls, resource: Resource):
        """ Prepare to build queries for the provided resource

        Example:
            build_articles_query = QueryBuilder.prepare(articles)
            query = build_articles_query(request).build()
        """
        return partial(cls, resource=resource)

    def build(self, query: Any = None) -> Any:
        """ Build the query: apply every operation

        Args:
            query: The query to start with. Default: `Resource.new_query()`

        Raises:
            exc.UnknownFieldError: unknown field mentioned
            Anything that the resource's callbacks raise
        """
        logger.debug('Building a query for "%s": %r', self.resource.type, self.request)

        if query is None:
            query = self.resource.new_query()

        query = self.filter(query)
        query = self.fields(query)
        query = self.sort(query)
        query = self.include(query)

        return self.resource.customize_query(query)

    def filter(self, query: Any) -> Any:
        """ Apply filter conditions to the query """
        return self.filter_op.apply_to_query(query)

    def fields(self, query: Any) -> Any:
        """ Apply the sparse fieldset to the query """
        return self.fields_op.apply_to_query(query)

    def sort(self, query: Any) -> Any:
        """ Apply sorting to the query """
        return self.sort_op.apply_to_query(query)

    def include(self, query: Any) -> Any:
        """ Apply related resource inclusion to the query """
        return self.include_op.apply_to_query(query)

    # Overridable classes: operations
    # Replace to customize how operations are executed
    FilterOperation = operations.FilterOperation
    FieldsOperation = operations.FieldsOperation
    SortOperation = operations.SortOperation
    IncludeOperation = operations.IncludeOperation
