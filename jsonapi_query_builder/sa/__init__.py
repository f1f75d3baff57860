""" SqlAlchemy integration: resources backed by ORM models """

from .resource import SAResource, SAQuery
