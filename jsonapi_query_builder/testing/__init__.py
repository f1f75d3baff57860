""" Tools for testing """

from .recorder import RecordingResource, RecordedQuery

from .recreate_tables import created_tables, get_metadata
from .table_data import insert

from .stmt_text import stmt2sql
