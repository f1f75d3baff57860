""" Operations that implement JSON-API request parameters

* filter: filter conditions, attribute and relationship ones
* fields: sparse fieldsets
* sort: define the order
* include: add related resources
"""

from .filter import FilterOperation
from .fields import FieldsOperation
from .sort import SortOperation
from .include import IncludeOperation
