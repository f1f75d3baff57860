""" Models for tests: a tiny blog """

import sqlalchemy as sa
import sqlalchemy.orm

from jsonapi_query_builder.testing import insert


Base = sa.orm.declarative_base()


class User(Base):
    __tablename__ = 'users'

    id = sa.Column(sa.Integer, primary_key=True)
    name = sa.Column(sa.String)
    has_bio = sa.Column(sa.Boolean)

    articles = sa.orm.relationship('Article', back_populates='author')
    comments = sa.orm.relationship('Comment', back_populates='author')


class Article(Base):
    __tablename__ = 'articles'

    id = sa.Column(sa.Integer, primary_key=True)
    title = sa.Column(sa.String)
    category = sa.Column(sa.String)
    published = sa.Column(sa.String)
    user_id = sa.Column(sa.ForeignKey(User.id))

    author = sa.orm.relationship(User, back_populates='articles')
    comments = sa.orm.relationship('Comment', back_populates='article')


class Comment(Base):
    __tablename__ = 'comments'

    id = sa.Column(sa.Integer, primary_key=True)
    body = sa.Column(sa.String)
    article_id = sa.Column(sa.ForeignKey(Article.id))
    user_id = sa.Column(sa.ForeignKey(User.id))

    article = sa.orm.relationship(Article, back_populates='comments')
    author = sa.orm.relationship(User, back_populates='comments')


def insert_blog_data(connection: sa.engine.Connection):
    """ Insert a few rows into every table

    Users:    1 "joe" (has bio), 2 "jane"
    Articles: 1, 2 by joe; 3 by jane
    Comments: 1 "Great", 2 "Great", 3 "Meh" on article 1; 4 "Great" on article 3
    """
    insert(connection, User,
           dict(id=1, name='joe', has_bio=True),
           dict(id=2, name='jane', has_bio=False),
    )
    insert(connection, Article,
           dict(id=1, title='Cats', category='animals', published='2021-01-01', user_id=1),
           dict(id=2, title='Python', category='code', published='2021-02-01', user_id=1),
           dict(id=3, title='Dogs', category='animals', published='2021-03-01', user_id=2),
    )
    insert(connection, Comment,
           dict(id=1, body='Great', article_id=1, user_id=2),
           dict(id=2, body='Great', article_id=1, user_id=1),
           dict(id=3, body='Meh', article_id=1, user_id=2),
           dict(id=4, body='Great', article_id=3, user_id=1),
    )
