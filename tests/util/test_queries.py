from typing import Union

import sqlalchemy as sa

from jsonapi_query_builder import Resource, RequestDict
from jsonapi_query_builder.testing import stmt2sql


def typical_test_recorded_query(request: RequestDict, resource: Resource, expected_calls: list[tuple]):
    """ Typical test helper: build a query with a recording resource, check the calls

    Typical test scenario:
    * Take a request
    * Build a query
    * Check which callbacks were called, in which order
    """
    query = resource.build(request)
    assert list(query) == expected_calls


def typical_test_sql_query_text(request: RequestDict, resource: Resource, expected_query_lines: list[str]):
    """ Typical test helper: build a statement, check SQL """
    stmt = resource.build(request)
    assert assert_statement_lines(stmt, *expected_query_lines)


def assert_statement_lines(stmt: Union[str, sa.sql.ClauseElement], *expected_lines: str, dialect: sa.engine.interfaces.Dialect = None):
    """ Find the provided lines inside a statement or fail """
    # Query?
    if isinstance(stmt, sa.sql.ClauseElement):
        stmt = stmt2sql(stmt, dialect)

    # Test
    for line in expected_lines:
        assert line.strip() in stmt, f'{line!r} not found in {stmt!r}'

    # Done
    return stmt
