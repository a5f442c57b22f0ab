"""
Search overlay results.

Ranking and indexing belong to whatever search backend the site uses;
docnav only turns its results into the rows the overlay shows. SiteSearch
is a plain title/description matcher over the manifest for the terminal
browser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .config.constants import MAX_SEARCH_RESULTS, NO_RESULTS_LABEL, NO_RESULTS_LINK
from .site import Site

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """A hit returned by a search backend."""

    title: str
    link: str
    doc_id: Optional[str] = None


@dataclass(frozen=True)
class ResultEntry:
    """One row of the overlay's result list."""

    label: str
    link: str
    doc_id: Optional[str] = None
    placeholder: bool = False


SearchFunction = Callable[[str], Sequence[SearchResult]]


def render_results(results: Sequence[SearchResult]) -> List[ResultEntry]:
    """Rows for a result set; a single placeholder row when it is empty."""
    if not results:
        return [ResultEntry(label=NO_RESULTS_LABEL, link=NO_RESULTS_LINK, placeholder=True)]
    return [ResultEntry(label=r.title, link=r.link, doc_id=r.doc_id) for r in results]


def results_for_query(query: str, search: SearchFunction) -> Optional[List[ResultEntry]]:
    """Run search for a typed query.

    Returns None for an empty query, meaning the list stays as it is.
    """
    if not query:
        return None
    return render_results(search(query))


class SiteSearch:
    """Case-insensitive substring search over document titles and descriptions.

    Title matches rank ahead of description-only matches; within each
    band manifest order is kept.
    """

    def __init__(self, site: Site, limit: int = MAX_SEARCH_RESULTS):
        self.site = site
        self.limit = limit

    def __call__(self, query: str) -> List[SearchResult]:
        return self.search(query)

    def search(self, query: str) -> List[SearchResult]:
        needle = query.strip().lower()
        if not needle:
            return []
        title_hits: List[SearchResult] = []
        other_hits: List[SearchResult] = []
        for doc in self.site.walk():
            if not doc.searchable:
                continue
            result = SearchResult(title=doc.title, link=doc.link, doc_id=doc.id)
            if needle in doc.title.lower():
                title_hits.append(result)
            elif needle in doc.description.lower():
                other_hits.append(result)
        hits = (title_hits + other_hits)[: self.limit]
        logger.debug("Search %r matched %d documents", query, len(hits))
        return hits
