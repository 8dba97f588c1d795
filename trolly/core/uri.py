"""Content identifier routing.

Identifiers look like ``content://<authority>/<path>``. A ``UriMatcher`` maps
``(authority, path pattern)`` pairs to integer route codes. In a pattern,
``#`` matches a segment made only of digits and ``*`` matches any segment.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

from .contract import AUTHORITY, SCHEME, ShoppingList

# Route codes
ITEMS = 1
ITEM_ID = 2


@dataclass(frozen=True)
class UriMatch:
    """Result of routing an identifier."""

    code: int
    uri: str
    item_id: int | None = None


def _segments(path: str) -> tuple[str, ...]:
    return tuple(s for s in path.split("/") if s)


class UriMatcher:
    """Immutable routing table for content identifiers."""

    def __init__(self, routes: Iterable[tuple[str, str, int]]):
        self._routes = tuple(
            (authority, _segments(pattern), code) for authority, pattern, code in routes
        )

    def match(self, uri: str) -> UriMatch | None:
        """Return the matching route for ``uri`` or None."""
        parts = urlsplit(uri)
        segments = _segments(parts.path)
        for authority, pattern, code in self._routes:
            if authority != parts.netloc or len(pattern) != len(segments):
                continue
            item_id = None
            for expected, actual in zip(pattern, segments):
                if expected == "#":
                    if not (actual.isascii() and actual.isdigit()):
                        break
                    item_id = int(actual)
                elif expected != "*" and expected != actual:
                    break
            else:
                return UriMatch(code=code, uri=uri, item_id=item_id)
        return None


uri_matcher = UriMatcher(
    [
        (AUTHORITY, ShoppingList.PATH, ITEMS),
        (AUTHORITY, f"{ShoppingList.PATH}/#", ITEM_ID),
    ]
)


def content_uri(path: str, authority: str = AUTHORITY) -> str:
    """Build an identifier for ``path`` under ``authority``."""
    return f"{SCHEME}://{authority}/{path.lstrip('/')}"


def with_appended_id(uri: str, item_id: int) -> str:
    """Append a numeric id segment to ``uri``."""
    return f"{uri.rstrip('/')}/{item_id}"


def notifies(observed: str, changed: str, descendants: bool = False) -> bool:
    """Whether a change to ``changed`` should reach an observer of ``observed``.

    A change reaches observers of the same identifier and of every identifier
    below it. Observers of an ancestor only see it when they asked for
    descendants.
    """
    obs_parts = urlsplit(observed)
    chg_parts = urlsplit(changed)
    obs = (obs_parts.netloc, *_segments(obs_parts.path))
    chg = (chg_parts.netloc, *_segments(chg_parts.path))
    if obs[: len(chg)] == chg:
        return True
    return descendants and chg[: len(obs)] == obs
