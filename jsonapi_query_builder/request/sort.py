""" Request: the "sort" parameter """

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from jsonapi_query_builder import exc

from .paths import split_csv


@dataclass
class SortQuery:
    """ Request parameter: "sort"

    Example:
        "category,-published": by category ascending, then by publication date descending
    """
    # The list of fields and directions to sort with
    # Note that the list is an ordered collection: the primary sort key goes first
    fields: list[SortingField]

    __slots__ = 'fields',

    @classmethod
    def from_request(cls, sort: Optional[str]) -> SortQuery:
        # Empty
        if sort is None:
            return cls(fields=[])

        # Check types
        if not isinstance(sort, str):
            raise exc.ShapeError('"sort" must be a comma-separated string')

        # Construct
        fields = [cls._parse_input_field(field) for field in split_csv(sort)]
        return cls(fields=fields)

    def export(self) -> str:
        return ','.join(
            field.export()
            for field in self.fields
        )

    @staticmethod
    def _parse_input_field(field: str) -> SortingField:
        """ Parse a sort term into a SortingField object """
        if field.startswith('-'):
            return SortingField(name=field[1:], direction=SortingDirection.DESC)
        else:
            return SortingField(name=field, direction=SortingDirection.ASC)


@dataclass
class SortingField:
    name: str
    direction: SortingDirection

    __slots__ = 'name', 'direction'

    def export(self) -> str:
        if self.direction == SortingDirection.DESC:
            return f'-{self.name}'
        else:
            return self.name


class SortingDirection(Enum):
    ASC = 'asc'
    DESC = 'desc'
