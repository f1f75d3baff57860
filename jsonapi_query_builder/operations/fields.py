from typing import Any

from jsonapi_query_builder.request import FieldsQuery, RequestDict
from jsonapi_query_builder.typing import FieldIdentifier
from jsonapi_query_builder.util.funcy import distinct

from .base import Operation


class FieldsOperation(Operation):
    """ Fields operation: select fields

    Handles: request.fields[type]
    When applied to a query:
    * Selects the fields listed in the sparse fieldset, plus the required ones (the primary key)
    * Selects all fields when there's no sparse fieldset for this type.
      Always setting the list keeps later operations from relying on whatever was selected by default.
    """
    fields: FieldsQuery

    def __init__(self, request: RequestDict, resource):
        super().__init__(request, resource)
        self.fields = FieldsQuery.from_request(request.get('fields'))

    __slots__ = 'fields',

    def apply_to_query(self, query: Any) -> Any:
        return self.resource.apply_fields(query, self.compile_fields())

    def compile_fields(self) -> list[FieldIdentifier]:
        """ Get the list of fields to select """
        field_names = self.fields.get(self.resource.type)

        # No sparse fieldset: everything
        if field_names is None:
            return self.resource.all_fields()

        # Required fields go first. Every field is mentioned once.
        field_names = list(distinct((
            *self.resource.required_fields(self.request),
            *field_names,
        )))

        return [
            self.resource.map_field(name)
            for name in field_names
        ]
