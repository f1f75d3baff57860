from __future__ import annotations

from typing import Any, TYPE_CHECKING

from jsonapi_query_builder.request import RequestDict


if TYPE_CHECKING:
    from jsonapi_query_builder.engine.resource import Resource


class Operation:
    """ Base for all operations. Defines the interface """
    request: RequestDict
    resource: Resource

    def __init__(self, request: RequestDict, resource: Resource):
        self.request = request
        self.resource = resource

    __slots__ = 'request', 'resource'

    def apply_to_query(self, query: Any) -> Any:
        """ Modify the query, return the new one """
        raise NotImplementedError
