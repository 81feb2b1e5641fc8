"""Utility type definitions."""

from typing import List, Optional, TypedDict


class LinkRecord(TypedDict):
    """TypedDict defining one entry of a persisted navigation snapshot."""

    display_name: Optional[str]
    url: Optional[str]
    position: int
    description: Optional[str]


Snapshot = List[LinkRecord]
