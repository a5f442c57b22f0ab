"""
Site manifest: the documents a generated documentation site is made of.

The static-site generator is outside docnav; what reaches us is a YAML
manifest listing each document with its metadata and children:

    title: Blazor University
    edit_root: https://github.com/example/site/edit/main/input
    documents:
      - id: intro
        title: Introduction
        description: Where to start
        published: 2019-08-01
        link: /intro/
        source: intro.md
        children:
          - title: Installing
            body: "# Installing"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from .exceptions import ManifestError

logger = logging.getLogger(__name__)

# Metadata keys the site generator emits; accepted as manifest aliases
SITE_TITLE = "SiteTitle"
SHOW_IN_SIDEBAR = "ShowInSidebar"
EDIT_ROOT = "EditRoot"
EDIT_LINK = "EditLink"
GENERATE_SEARCH_INDEX = "GenerateSearchIndex"

_FIELD_ALIASES = {
    SHOW_IN_SIDEBAR: "show_in_sidebar",
    EDIT_LINK: "edit_link",
    GENERATE_SEARCH_INDEX: "searchable",
    "Title": "title",
    "Description": "description",
    "Published": "published",
    "Link": "link",
}

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated id derived from a title."""
    return _SLUG_RE.sub("-", text.lower()).strip("-") or "doc"


@dataclass
class SiteDocument:
    """One page of the site and its place in the navigation hierarchy."""

    id: str
    title: str
    description: str = ""
    published: Optional[date] = None
    link: str = ""
    body: str = ""
    show_in_sidebar: bool = True
    searchable: bool = True
    edit_link: Optional[str] = None
    children: List[SiteDocument] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        """Whether the document has children shown in the sidebar."""
        return any(child.show_in_sidebar for child in self.children)


@dataclass
class Site:
    """The whole manifest: site metadata plus root documents."""

    title: str
    documents: List[SiteDocument] = field(default_factory=list)
    edit_root: Optional[str] = None

    def walk(self) -> Iterator[SiteDocument]:
        """Every document, depth first in manifest order."""
        stack = list(reversed(self.documents))
        while stack:
            doc = stack.pop()
            yield doc
            stack.extend(reversed(doc.children))

    def find(self, doc_id: str) -> Optional[SiteDocument]:
        for doc in self.walk():
            if doc.id == doc_id:
                return doc
        return None

    def parent_of(self, doc_id: str) -> Optional[SiteDocument]:
        for doc in self.walk():
            if any(child.id == doc_id for child in doc.children):
                return doc
        return None

    def first_document(self) -> Optional[SiteDocument]:
        for doc in self.documents:
            if doc.show_in_sidebar:
                return doc
        return None


def _parse_published(value: Any, doc_id: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        logger.warning("Ignoring unparseable published date %r on %s", value, doc_id)
        return None


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {_FIELD_ALIASES.get(key, key): value for key, value in raw.items()}


def _build_document(
    raw: Any,
    base_dir: Optional[Path],
    edit_root: Optional[str],
    seen: Dict[str, str],
) -> SiteDocument:
    if not isinstance(raw, dict):
        raise ManifestError("Document entry must be a mapping", entry=raw)
    data = _normalize(raw)

    title = data.get("title")
    if not title:
        raise ManifestError("Document is missing a title", entry=raw)
    title = str(title)
    doc_id = str(data.get("id") or slugify(title))
    if doc_id in seen:
        raise ManifestError("Duplicate document id", id=doc_id, first=seen[doc_id])
    seen[doc_id] = title

    body = str(data.get("body") or "")
    source = data.get("source")
    if source and not body:
        source_path = (base_dir / source) if base_dir else Path(source)
        try:
            body = source_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ManifestError("Failed to read document source", path=str(source_path)) from e

    edit_link = data.get("edit_link")
    if not edit_link and edit_root and source:
        edit_link = f"{edit_root.rstrip('/')}/{source}"

    children_raw = data.get("children") or []
    if not isinstance(children_raw, list):
        raise ManifestError("Document children must be a list", id=doc_id)

    return SiteDocument(
        id=doc_id,
        title=title,
        description=str(data.get("description") or ""),
        published=_parse_published(data.get("published"), doc_id),
        link=str(data.get("link") or f"/{doc_id}/"),
        body=body,
        show_in_sidebar=bool(data.get("show_in_sidebar", True)),
        searchable=bool(data.get("searchable", True)),
        edit_link=edit_link,
        children=[_build_document(child, base_dir, edit_root, seen) for child in children_raw],
    )


def parse_site(data: Any, base_dir: Optional[Path] = None) -> Site:
    """Build a Site from an already-decoded manifest mapping."""
    if not isinstance(data, dict):
        raise ManifestError("Manifest must be a mapping")
    title = str(data.get("title") or data.get(SITE_TITLE) or "Documentation")
    edit_root = data.get("edit_root") or data.get(EDIT_ROOT)
    documents_raw = data.get("documents") or []
    if not isinstance(documents_raw, list):
        raise ManifestError("Manifest documents must be a list")

    seen: Dict[str, str] = {}
    documents = [_build_document(raw, base_dir, edit_root, seen) for raw in documents_raw]
    logger.info("Loaded site %r with %d documents", title, len(seen))
    return Site(title=title, documents=documents, edit_root=edit_root)


def load_site(path: Path) -> Site:
    """Load and validate a YAML site manifest."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError("Failed to read manifest", path=str(path)) from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManifestError("Manifest is not valid YAML", path=str(path)) from e
    return parse_site(data, base_dir=path.parent)
