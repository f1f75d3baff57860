import sqlalchemy as sa
import sqlalchemy.orm

from jsonapi_query_builder.typing import SAModelOrAlias


def model_name(Model: SAModelOrAlias) -> str:
    """ Get the name of the Model for this class """
    # We can't do `Model.__name__` because we can be given an aliased class
    return unaliased_class(Model).__name__


def unaliased_class(Model: SAModelOrAlias) -> type:
    """ Get the actual model class; unaliased, if was

    Args:
         Model: model class or AliasedClass
    """
    return sa.orm.class_mapper(Model).class_
