from typing import Optional


class BaseJsonApiQueryError(Exception):
    pass


class ShapeError(BaseJsonApiQueryError, ValueError):
    """ Invalid input provided by the User

    Reported when a request parameter has the wrong structure: e.g. "fields" is not an object
    """

    def __init__(self, err: str):
        super().__init__(f'Request error: {err}')


class UnknownFieldError(BaseJsonApiQueryError, LookupError):
    """ Request mentioned an unknown field name

    Reported when a field mentioned by name is not known to the resource
    """

    def __init__(self, resource: str, field_name: str, where: Optional[str] = None):
        self.resource = resource
        self.field_name = field_name
        self.where = where

        if where:
            super().__init__(f'Unknown field "{field_name}" for "{resource}" specified in {where}')
        else:
            super().__init__(f'Unknown field "{field_name}" for "{resource}"')


class UnknownRelationshipError(UnknownFieldError):
    """ Request mentioned an unknown relationship name

    Reported when a relationship mentioned by name is not found on the resource
    """
