from __future__ import annotations

import dataclasses
from collections import abc
from typing import Any, Optional, Union, TYPE_CHECKING

from jsonapi_query_builder import exc
from jsonapi_query_builder.util.funcy import distinct


if TYPE_CHECKING:
    from jsonapi_query_builder.request import RequestDict, SortingDirection
    from jsonapi_query_builder.typing import FieldIdentifier


@dataclasses.dataclass
class Resource:
    """ Resource: how to build queries for one resource type

    This object defines everything the builder needs to know about a resource type:
    its name, its relationships, its fields, and the callbacks that actually modify the query.
    The builder never looks inside the query: it only passes it from one callback to another.

    Subclass it and implement the callbacks:

        class ArticleResource(Resource):
            def new_query(self):
                return ...

            def apply_attribute(self, query, key, value):
                # key="tag", value="animals"
                return ...

            def apply_join(self, query, relationship, sub_request):
                # relationship="author", sub_request={"filter": {"has_bio": "1"}}
                return ...

            def apply_include(self, query, relationship, sub_request):
                # relationship="comments", sub_request={"include": "author", "filter": {...}, "fields": {...}}
                return ...

        articles = ArticleResource('articles', relationships={'author', 'comments'}, fields=('title', 'body'))
        query = articles.build({'filter': {'tag': 'animals'}, 'include': 'comments'})
    """
    # Resource type name: the key into the "fields" parameter
    type: str

    # Names of relationships. Used to tell relationship filters from attribute filters
    relationships: abc.Collection[str] = frozenset()

    # Names of fields declared by the schema
    fields: abc.Sequence[str] = ()

    # Names of primary key fields. Always selected: included relationships need them
    primary_key: abc.Sequence[str] = ('id',)

    # Resources for related types: i.e. relationships
    # A mapping { relationship name => Resource }, where the value can optionally be a lambda
    related: Optional[dict[str, Union[Resource, abc.Callable[[], Resource]]]] = None

    # Getter function for related resources
    related_getter: Optional[abc.Callable[[str], Optional[Resource]]] = None

    def __post_init__(self):
        self.relationships = frozenset(self.relationships)
        self.fields = tuple(self.fields)
        self.primary_key = tuple(self.primary_key)

    def build(self, request: Optional[RequestDict]) -> Any:
        """ Build a query from a JSON-API request

        Raises:
            exc.ShapeError: malformed request
            exc.UnknownFieldError: unknown field mentioned
        """
        return QueryBuilder(request, self).build()

    def get_related_resource(self, relationship: str) -> Optional[Resource]:
        """ Get the Resource for a related type

        Default behavior: use `related_getter(name)`, fall back to `self.related[name]`
        You can override this method for custom behavior
        """
        return (
            # Use the getter function, if provided
            (self.related_getter and self.related_getter(relationship)) or
            # Fall back to the dict key, if available
            _getitem_callable(self.related, relationship) or
            # Give None, if nothing worked
            None
        )

    # ### Callbacks for QueryBuilder
    # Operations will use these methods to modify the query

    def new_query(self) -> Any:
        """ Callback that starts a fresh query for this resource """
        raise NotImplementedError

    def apply_attribute(self, query: Any, key: str, value: Any) -> Any:
        """ Callback that applies an attribute filter

        Example:
            apply_attribute(query, 'tag', 'animals')
        """
        raise NotImplementedError

    def apply_join(self, query: Any, relationship: str, sub_request: RequestDict) -> Any:
        """ Callback that filters the primary data by a relationship

        Typically, an inner join with the related resource's filtered query.

        Example:
            apply_join(query, 'author', {'filter': {'has_bio': '1'}})
        """
        raise NotImplementedError

    def apply_include(self, query: Any, relationship: str, sub_request: RequestDict) -> Any:
        """ Callback that adds an included relationship to the query

        Make sure the primary key stays selected: it's needed to associate related rows with their parents.

        Example:
            apply_include(query, 'comments', {'include': 'author', 'filter': {'body': 'Great'}, 'fields': None})
        """
        raise NotImplementedError

    def map_field(self, name: str) -> FieldIdentifier:
        """ Callback: convert a field name from the request into a field identifier

        Default behavior: only known field names are accepted, and they're returned as is.

        Raises:
            exc.UnknownFieldError
        """
        if name in self.primary_key or name in self.fields:
            return name
        raise exc.UnknownFieldError(self.type, name)

    def all_fields(self) -> list[FieldIdentifier]:
        """ Callback: the list of fields to select when the request has no sparse fieldset for this type """
        return [
            self.map_field(name)
            for name in distinct((*self.primary_key, *self.fields))
        ]

    def required_fields(self, request: RequestDict) -> abc.Sequence[str]:
        """ Callback: names of fields that are selected even if the sparse fieldset does not mention them """
        return self.primary_key  # type: ignore[return-value]

    def apply_fields(self, query: Any, fields: list[FieldIdentifier]) -> Any:
        """ Callback that restricts the query to the given fields """
        raise NotImplementedError

    def apply_sort(self, query: Any, ordering: list[tuple[SortingDirection, FieldIdentifier]]) -> Any:
        """ Callback that sets the ordering of the query

        Args:
            ordering: (direction, field) pairs. The primary sort key goes first.
        """
        raise NotImplementedError

    def customize_query(self, query: Any) -> Any:
        """ Callback that customizes the query

        Used by: QueryBuilder.build(), after all operations were applied.
        This is your last chance to make changes to the query: e.g. add a security filter.

        Default behavior: none
        """
        return query


def _getitem_callable(d: Optional[dict], k: str):
    """ Get d[k] if possible. Resolve the value if its callable """
    if d is None:
        return None

    value = d.get(k)
    if callable(value):
        value = value()

    return value


from .query_builder import QueryBuilder
