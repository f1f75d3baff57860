""" Create DB structure -- for testing """

from __future__ import annotations

from contextlib import contextmanager
from typing import Union

import sqlalchemy as sa
from sqlalchemy import MetaData


@contextmanager
def created_tables(bind: EngineOrConnection, metadata: Union[MetaData, type]):
    """ Temporarily create tables, drop them when the context is quit

    Example:
        class Base(sa.orm.DeclarativeBase):
            pass

        with engine.connect() as conn:
            with created_tables(conn, Base):
                ...

    Args:
        bind: A connectable: Engine or Connection
        metadata: MetaData, or a declarative base class
    """
    metadata = get_metadata(metadata)

    metadata.create_all(bind=bind)
    try:
        yield
    finally:
        metadata.drop_all(bind=bind)


def get_metadata(obj: Union[MetaData, type]) -> MetaData:
    """ Get metadata (DB structure) from an object """
    # MetaData object
    if isinstance(obj, MetaData):
        return obj
    # Declarative class
    elif isinstance(getattr(obj, 'metadata', None), MetaData):
        return obj.metadata  # type: ignore[union-attr]
    # Unsupported
    else:
        raise NotImplementedError(obj)


EngineOrConnection = Union[sa.engine.Engine, sa.engine.Connection]
