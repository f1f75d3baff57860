from functools import cache

import sqlalchemy as sa
import sqlalchemy.orm


@cache
def primary_key_names(Model: type) -> tuple[str, ...]:
    """ Get the list of primary key attribute names """
    mapper = sa.orm.class_mapper(Model)
    return tuple(mapper.get_property_by_column(c).key for c in primary_key_columns(Model))


@cache
def primary_key_columns(Model: type) -> tuple[sa.Column, ...]:
    """ Get the list of primary key columns """
    return tuple(c for c in sa.orm.class_mapper(Model).primary_key)
