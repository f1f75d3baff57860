""" Tools for parsing a JSON-API request

These classes only represent the structure of the request parameters.
They do not interact with the query in any way: that's what operations do.
"""

from .request import RequestDict, ensure_request

from .paths import split_csv, split_path, first_segment, group_paths, join_grouped_paths
from .filter import FilterQuery, FilterKind
from .filter import is_join_filter, is_preload_filter, is_relationship_filter, classify_filter
from .filter import trim_leading_relationship_from_keys
from .fields import FieldsQuery
from .sort import SortQuery, SortingField, SortingDirection
from .include import IncludeQuery, related_request
