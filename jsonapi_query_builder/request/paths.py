""" Dotted paths: "articles.comments.author"

Both "include" and relationship filters use dot-notation to walk relationships.
The tools here group such paths by their leading segment so that every level only deals with its own relationships
and forwards the remainder to the next level.
"""

from collections import abc

from jsonapi_query_builder.util.funcy import collecting


@collecting
def split_csv(value: str) -> abc.Iterator[str]:
    """ Split a comma-separated string, drop empty segments

    Example:
        split_csv('a,,b,') #-> ['a', 'b']
    """
    for item in value.split(','):
        if item:
            yield item


def split_path(path: str) -> tuple[str, str]:
    """ Split a dotted path into the leading segment and the remainder

    Example:
        split_path('a') #-> 'a', ''
        split_path('a.b.c') #-> 'a', 'b.c'
    """
    head, _, tail = path.partition('.')
    return head, tail


def first_segment(path: str) -> str:
    """ Get the first segment of a dotted relationship path

    Example:
        first_segment('a.b.c') #-> 'a'
    """
    return split_path(path)[0]


def group_paths(paths_csv: str) -> dict[str, str]:
    """ Group a comma-separated list of dotted paths by their leading segment

    Groups are ordered by the first appearance of their leading segment.

    Example:
        group_paths('a,a.b,a.b.c,a.d,e') #-> {'a': 'b,b.c,d', 'e': ''}
    """
    groups: dict[str, list[str]] = {}
    for path in split_csv(paths_csv):
        head, tail = split_path(path)
        tails = groups.setdefault(head, [])
        if tail:
            tails.append(tail)

    return {
        head: ','.join(tails)
        for head, tails in groups.items()
    }


def join_grouped_paths(groups: abc.Mapping[str, str]) -> str:
    """ Flatten grouped paths back into a comma-separated string

    Example:
        join_grouped_paths({'a': 'b,b.c,d', 'e': ''}) #-> 'a,a.b,a.b.c,a.d,e'
    """
    paths = []
    for head, tails_csv in groups.items():
        paths.append(head)
        paths.extend(f'{head}.{tail}' for tail in split_csv(tails_csv))
    return ','.join(paths)
