""" Convert a SA SQL statement to readable text """
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# The dialect to use for compiling statements
DEFAULT_DIALECT: sa.engine.interfaces.Dialect = postgresql.dialect()  # type: ignore[misc]


def stmt2sql(stmt: sa.sql.ClauseElement, dialect: sa.engine.interfaces.Dialect = None) -> str:
    """ Convert an SqlAlchemy statement into a string """
    # See: http://stackoverflow.com/a/4617623/134904
    # This intentionally does not escape values!
    query = stmt.compile(dialect=dialect or DEFAULT_DIALECT)
    return _insert_query_params(query.string, query.params)  # type: ignore[arg-type]


def _insert_query_params(statement_str: str, parameters: dict):
    """ Compile a statement by inserting *unquoted* parameters into the query """
    return statement_str % parameters
