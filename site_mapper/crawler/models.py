# site_mapper/crawler/models.py
"""
Data models for the site_mapper crawler.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Set


class NodeState(str, enum.Enum):
    """Outcome of checking a node."""

    NEW = "new"
    FINISHED = "finished"
    ERRORED = "errored"
    EXTERNAL = "external"


@dataclass(eq=False, slots=True)
class Node:
    """One discovered URL. Identity-hashed: the graph holds exactly one per URL."""

    url: str
    referrers: Set[str] = field(default_factory=set)
    title: str = ""
    error: Optional[str] = None
    state: NodeState = NodeState.NEW


@dataclass(slots=True)
class PageData:
    """Holds the final URL, status and decoded HTML of a navigated page."""

    url: str
    status: Optional[int]
    content: str = ""
