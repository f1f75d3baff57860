""" Build a query from a JSON-API request

Overview:

* Resource describes one resource type: its name, relationships, fields, and the callbacks that modify the query.
* QueryBuilder applies the request to a query, one operation after another, using the Resource's callbacks.
"""

from .resource import Resource
from .query_builder import QueryBuilder
