from typing import Any, Union

import sqlalchemy as sa
import sqlalchemy.orm


# Annotation for field identifiers returned by Resource.map_field()
# Plain names for a bare Resource; instrumented attributes for SAResource
FieldIdentifier = Any

# Annotation for SqlAlchemy models
SAModel = type

# Annotation for SqlAlchemy models or aliased classes
SAModelOrAlias = Union[SAModel, sa.orm.util.AliasedClass]

# An SqlAlchemy attribute
# That is, the instrumented attribute you get when accessing <model>.<attribute>
SAAttribute = Union[sa.orm.attributes.InstrumentedAttribute, sa.orm.interfaces.MapperProperty]  # type: ignore[name-defined]
