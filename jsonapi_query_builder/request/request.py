""" JSON-API request: the parsed query parameters you can build a query from """

from __future__ import annotations

from collections import abc
from typing import Any, Optional, TypedDict

from jsonapi_query_builder import exc


class RequestDict(TypedDict, total=False):
    """ Dict representation of a JSON-API request

    Example:
        {
            "filter": {"tag": "animals", "author.has_bio": "1", "comments": {"body": "Great"}},
            "fields": {"articles": "title,body"},
            "sort": "category,-published",
            "include": "author,comments.author",
        }
    """
    filter: Optional[dict[str, Any]]
    fields: Optional[dict[str, str]]
    sort: Optional[str]
    include: Optional[str]


def ensure_request(input: Optional[abc.Mapping[str, Any]]) -> RequestDict:
    """ Get a request dict from any valid input

    Raises:
        exc.ShapeError: the request is not an object
    """
    if input is None:
        return RequestDict()
    elif isinstance(input, abc.Mapping):
        return input  # type: ignore[return-value]
    else:
        raise exc.ShapeError(f'Request must be an object, "{type(input).__name__}" given')
