from __future__ import annotations

import sqlalchemy as sa
import sqlalchemy.orm
from sqlalchemy.orm import InstrumentedAttribute, RelationshipProperty

from jsonapi_query_builder.sainfo.names import model_name
from jsonapi_query_builder.typing import SAModelOrAlias, SAAttribute
from jsonapi_query_builder import exc


def resolve_relation_by_name(field_name: str, Model: SAModelOrAlias, *, where: str = None) -> InstrumentedAttribute:
    try:
        attribute = getattr(Model, field_name)
    except AttributeError as e:
        raise exc.UnknownRelationshipError(model_name(Model), field_name, where=where) from e

    # Check that it actually is a relationship
    if not is_relation(attribute):
        raise exc.UnknownRelationshipError(model_name(Model), field_name, where=where)

    # Done
    return attribute


def relation_names(Model: type) -> tuple[str, ...]:
    """ Get the names of relationships of a model """
    return tuple(
        sa.orm.class_mapper(Model).relationships.keys()
    )


def is_relation(attribute: SAAttribute):
    return (
        isinstance(attribute, InstrumentedAttribute) and
        isinstance(attribute.property, RelationshipProperty) and
        # "dynamic" and "write_only" relationships can't be loaded by a query
        attribute.property.lazy not in ('dynamic', 'write_only')
    )


def target_model(attribute: SAAttribute) -> type:
    return attribute.property.mapper.class_
