""" Request: the "fields" parameter (sparse fieldsets) """

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Optional

from jsonapi_query_builder import exc

from .paths import split_csv


@dataclass
class FieldsQuery:
    """ Request parameter: "fields"

    Sparse fieldsets are keyed by resource type and are global to the whole request:
    the same mapping applies to the primary resource and to every included resource.
    """
    # Requested field names: { resource type => [field name, ...] }
    fieldsets: dict[str, list[str]]

    __slots__ = 'fieldsets',

    @classmethod
    def from_request(cls, fields: Optional[abc.Mapping[str, str]]) -> FieldsQuery:
        # Empty
        if fields is None:
            return cls(fieldsets={})

        # Check types
        if not isinstance(fields, abc.Mapping):
            raise exc.ShapeError('"fields" must be an object')

        fieldsets = {}
        for type, field_names in fields.items():
            if not isinstance(field_names, str):
                raise exc.ShapeError(f'"fields[{type}]" must be a comma-separated string')
            fieldsets[type] = split_csv(field_names)

        # Construct
        return cls(fieldsets=fieldsets)

    def export(self) -> dict[str, str]:
        return {
            type: ','.join(names)
            for type, names in self.fieldsets.items()
        }

    def get(self, type: str) -> Optional[list[str]]:
        """ Get the requested field names for a resource type, or None if not restricted """
        return self.fieldsets.get(type)
