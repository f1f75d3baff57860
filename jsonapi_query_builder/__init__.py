from importlib.metadata import version

__version__ = version('jsonapi-query-builder')

from . import exc

from .engine import Resource, QueryBuilder
from .request import RequestDict

from . import request

from .sa import SAResource


# TODO: filter by many-to-many relationships in SAResource.apply_join(): join through the secondary table
