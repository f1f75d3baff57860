from __future__ import annotations

import sqlalchemy as sa
import sqlalchemy.orm
from sqlalchemy.orm import ColumnProperty, InstrumentedAttribute, MapperProperty

from jsonapi_query_builder.sainfo.names import model_name
from jsonapi_query_builder.typing import SAModelOrAlias, SAAttribute
from jsonapi_query_builder import exc


def resolve_column_by_name(field_name: str, Model: SAModelOrAlias, *, where: str = None) -> InstrumentedAttribute:
    # As simple as it looks, this code invokes __getattr__() on sa.orm.AliasedClass which adapts the SQL expression
    # to make sure it uses the proper aliased name in queries
    try:
        attribute = getattr(Model, field_name)
    except AttributeError as e:
        raise exc.UnknownFieldError(model_name(Model), field_name, where=where) from e

    # Check that it actually is a column
    if not is_column(attribute):
        raise exc.UnknownFieldError(model_name(Model), field_name, where=where)

    # Done
    return attribute


def column_names(Model: type) -> tuple[str, ...]:
    """ Get the names of column attributes of a model, in declaration order """
    return tuple(
        prop.key
        for prop in sa.orm.class_mapper(Model).column_attrs
    )


def column_attribute_name(Model: type, column: sa.Column) -> str:
    """ Get the name of the attribute that maps a table column """
    return sa.orm.class_mapper(Model).get_property_by_column(column).key


def is_column(attribute: SAAttribute):
    return (
        isinstance(attribute, (InstrumentedAttribute, MapperProperty)) and
        isinstance(attribute.property, ColumnProperty)
    )
