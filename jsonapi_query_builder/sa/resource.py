""" SAResource: build SqlAlchemy ORM statements from JSON-API requests """

from __future__ import annotations

from collections import abc
from typing import Any, Optional, Union

import sqlalchemy as sa
import sqlalchemy.orm

from jsonapi_query_builder import exc
from jsonapi_query_builder.engine import Resource, QueryBuilder
from jsonapi_query_builder.request import RequestDict, IncludeQuery, SortingDirection
from jsonapi_query_builder.sainfo.columns import resolve_column_by_name, column_names, column_attribute_name
from jsonapi_query_builder.sainfo.relations import resolve_relation_by_name, relation_names, target_model
from jsonapi_query_builder.sainfo.primary_key import primary_key_names, primary_key_columns
from jsonapi_query_builder.typing import SAAttribute
from jsonapi_query_builder.util.funcy import distinct


# The query that SAResource works with:
# * a Select statement, for the primary data
# * a loader option, for included relationships
SAQuery = Union[sa.sql.Select, sa.orm.Load]


class SAResource(Resource):
    """ Resource backed by an SqlAlchemy model

    The query is an ORM `select(Model)` statement. Every callback has a default implementation:

    * Attribute filters: `WHERE column = value`
    * Join filters: INNER JOIN with a subquery that selects the related resource's filtered rows
    * Include: `selectinload()`, restricted by the preload filter, with sparse fieldsets and nested includes
    * Fields: `load_only()`
    * Sort: `ORDER BY`

    Override any of them to customize:

        class ArticleResource(SAResource):
            def apply_attribute(self, stmt, key, value):
                if key == 'tag':
                    return stmt.where(Article.tag_list.any(value))
                return super().apply_attribute(stmt, key, value)

        articles = ArticleResource(Article, 'articles', related={'author': lambda: users})
        stmt = articles.build({'filter': {'tag': 'animals'}, 'include': 'author'})
        ssn.execute(stmt).scalars().all()
    """
    # The model to query
    Model: type

    def __init__(self,
                 Model: type,
                 type: str = None,
                 *,
                 relationships: abc.Collection[str] = None,
                 related: Optional[dict[str, Union[Resource, abc.Callable[[], Resource]]]] = None,
                 related_getter: Optional[abc.Callable[[str], Optional[Resource]]] = None,
                 ):
        """ Describe a resource backed by a model

        Args:
            Model: The SqlAlchemy model class
            type: Resource type name. Default: the table name
            relationships: Relationship names. Default: all relationships of the model
            related: Resources for relationships. Default: a plain SAResource of the target model
            related_getter: Getter function for related resources
        """
        self.Model = Model
        super().__init__(
            type=type or Model.__tablename__,
            relationships=relation_names(Model) if relationships is None else relationships,
            fields=column_names(Model),
            primary_key=primary_key_names(Model),
            related=related,
            related_getter=related_getter,
        )

    def get_related_resource(self, relationship: str) -> SAResource:  # type: ignore[override]
        """ Get the resource for a relationship. Default: a plain SAResource of the target model """
        resource = super().get_related_resource(relationship)

        if resource is None:
            attribute = resolve_relation_by_name(relationship, self.Model)
            resource = SAResource(target_model(attribute))

        return resource  # type: ignore[return-value]

    # ### Callbacks for QueryBuilder

    def new_query(self) -> sa.sql.Select:
        return sa.select(self.Model)

    def map_field(self, name: str) -> SAAttribute:
        return resolve_column_by_name(name, self.Model)

    def required_fields(self, request: RequestDict) -> tuple[str, ...]:
        """ The primary key, and the local columns of included relationships

        Foreign keys are needed to load many-to-one relationships: they're the only link to the related row.
        """
        include = IncludeQuery.from_request(request.get('include'))
        return tuple(distinct((
            *self.primary_key,
            *self._relationship_local_field_names(include.relations or {}),
        )))

    def apply_fields(self, query: SAQuery, fields: list[SAAttribute]) -> SAQuery:
        # Works for both: a Select, and a loader option
        return query.options(sa.orm.load_only(*fields))

    def apply_sort(self, stmt: sa.sql.Select, ordering: list[tuple[SortingDirection, SAAttribute]]) -> sa.sql.Select:
        return stmt.order_by(*(
            field.desc() if direction == SortingDirection.DESC else field.asc()
            for direction, field in ordering
        ))

    def apply_attribute(self, stmt: sa.sql.Select, key: str, value: Any) -> sa.sql.Select:
        """ Filter by attribute: equality """
        if isinstance(value, (abc.Mapping, list, tuple, set)):
            raise exc.ShapeError(f'"filter[{key}]" must be a scalar value')

        return stmt.where(self.map_field(key) == value)

    def apply_join(self, stmt: sa.sql.Select, relationship: str, sub_request: RequestDict) -> sa.sql.Select:
        """ Filter by relationship: INNER JOIN with the related resource's filtered rows

        Example:
            {"filter": {"author.has_bio": True}}
            -> JOIN (SELECT DISTINCT users.id AS id FROM users WHERE users.has_bio = true) AS anon_1
               ON articles.user_id = anon_1.id
        """
        attribute = resolve_relation_by_name(relationship, self.Model, where='filter')
        relation: sa.orm.RelationshipProperty = attribute.property

        if relation.secondary is not None:
            raise NotImplementedError(f'Filtering by a many-to-many relationship is not supported: "{relationship}"')

        # Related rows that pass the filter
        related = self.get_related_resource(relationship)
        related_stmt = QueryBuilder(sub_request, related).filter(related.new_query())

        # Only select the columns we join on.
        # DISTINCT: with one-to-many, many related rows may point to the same parent
        pairs = relation.local_remote_pairs
        subquery = (
            related_stmt
            .with_only_columns(*(remote for local, remote in pairs))
            .distinct()
            .subquery()
        )

        return stmt.join(subquery, sa.and_(*(
            local == subquery.c[remote.key]
            for local, remote in pairs
        )))

    def apply_include(self, query: SAQuery, relationship: str, sub_request: RequestDict) -> SAQuery:
        """ Include a relationship: load it with selectinload() """
        return query.options(self.loader_option(relationship, sub_request))

    # ### Tools

    def loader_option(self, relationship: str, sub_request: RequestDict) -> sa.orm.Load:
        """ Make a loader option that loads a relationship as requested

        Args:
            relationship: The relationship to load
            sub_request: The request for the related resource: "filter", "fields", "include"
        """
        attribute = resolve_relation_by_name(relationship, self.Model, where='include')
        related = self.get_related_resource(relationship)

        # Only load related rows that pass the preload filter
        criteria = related.filter_criteria(sub_request)
        option = sa.orm.selectinload(attribute if criteria is None else attribute.and_(criteria))

        # Sparse fieldsets & nested includes: the related resource applies them to the loader option itself
        builder = QueryBuilder(RequestDict(fields=sub_request.get('fields'), include=sub_request.get('include')), related)
        return builder.include(builder.fields(option))

    def filter_criteria(self, request: RequestDict) -> Optional[sa.sql.ColumnElement]:
        """ Make a condition that only matches the rows that pass the request's filter

        Returns:
            `pk IN (SELECT pk FROM ... WHERE ...)`, or None when there's no filter
        """
        if not request.get('filter'):
            return None

        stmt = QueryBuilder(RequestDict(filter=request['filter']), self).filter(self.new_query())

        pk = primary_key_columns(self.Model)
        stmt = stmt.with_only_columns(*pk).correlate(None)
        if len(pk) == 1:
            return pk[0].in_(stmt)
        else:
            return sa.tuple_(*pk).in_(stmt)

    def _relationship_local_field_names(self, relationships: abc.Iterable[str]) -> abc.Iterator[str]:
        """ Get the names of local columns that relationships use to link to related rows """
        for relationship in relationships:
            attribute = resolve_relation_by_name(relationship, self.Model, where='include')
            local_columns = attribute.property.local_columns
            for column in self.Model.__table__.columns:
                if column in local_columns:
                    yield column_attribute_name(self.Model, column)
