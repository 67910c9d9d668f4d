"""
Blog Corpus Statistics
======================

Pure aggregate computations over an in-memory sequence of blog posts.

Functions:
- total_likes(): Sum of like counts
- favorite_blog(): Post with the most likes
- most_blogs(): Author with the most posts
- most_likes(): Author whose posts collected the most likes

Every function accepts any iterable of objects exposing ``likes`` and
``author`` (the Blog domain model and BlogResponse DTO both do), never
mutates it, and returns None instead of raising on empty input.

Ties are always broken in favour of the LAST candidate: the last tied post
in input order, or the last tied author in first-seen author order.
Author strings are grouped exactly as given (no case or whitespace folding).
"""
# Standard library imports
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Protocol, TypeVar


class BlogLike(Protocol):
    """Anything carrying the fields the statistics need"""
    author: str
    likes: int


T = TypeVar("T", bound=BlogLike)


class AuthorBlogCount(NamedTuple):
    author: str
    blogs: int


class AuthorLikes(NamedTuple):
    author: str
    likes: int


def total_likes(blogs: Iterable[BlogLike]) -> int:
    """Sum of like counts; 0 for an empty corpus"""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Iterable[T]) -> Optional[T]:
    """
    Return the post with the highest like count.

    When several posts share the maximum, the last one in input order wins.
    """
    favorite: Optional[T] = None
    for blog in blogs:
        if favorite is None or blog.likes >= favorite.likes:
            favorite = blog
    return favorite


def _group_by_author(
    blogs: Iterable[BlogLike],
    value: Callable[[BlogLike], int],
) -> Dict[str, int]:
    """Single pass accumulation keyed by raw author string, in first-seen order"""
    totals: Dict[str, int] = {}
    for blog in blogs:
        totals[blog.author] = totals.get(blog.author, 0) + value(blog)
    return totals


def _last_max(totals: Dict[str, int]) -> Optional[tuple]:
    best: Optional[tuple] = None
    for author, total in totals.items():
        if best is None or total >= best[1]:
            best = (author, total)
    return best


def most_blogs(blogs: Iterable[BlogLike]) -> Optional[AuthorBlogCount]:
    """Author with the most posts and that post count"""
    best = _last_max(_group_by_author(blogs, lambda blog: 1))
    if best is None:
        return None
    return AuthorBlogCount(author=best[0], blogs=best[1])


def most_likes(blogs: Iterable[BlogLike]) -> Optional[AuthorLikes]:
    """Author whose posts have the largest summed like count, and that sum"""
    best = _last_max(_group_by_author(blogs, lambda blog: blog.likes))
    if best is None:
        return None
    return AuthorLikes(author=best[0], likes=best[1])
