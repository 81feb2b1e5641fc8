"""Ordered collection of the links offered so far in a session."""

from typing import Iterable, Iterator, List, Optional

from nautobot_clickpath.types import LinkRecord, Snapshot


def record_matches(record: LinkRecord, display_name: Optional[str] = None, url: Optional[str] = None) -> bool:
    """Match a record by display name and/or URL.

    If both are given both must match, if only one is given only that one must match. With
    neither given nothing matches.
    """
    if display_name and url:
        return record.get("display_name") == display_name and record.get("url") == url
    if display_name:
        return record.get("display_name") == display_name
    if url:
        return record.get("url") == url
    return False


class LinkRegistry:
    """Ordered, deduplicated list of link records.

    The registry itself only stores records; deciding whether a link may be added is the job
    of `NavigationEngine.add()`, which checks `exists()` before calling `insert()`.
    """

    def __init__(self, records: Optional[Iterable[LinkRecord]] = None):
        """Create a registry, optionally seeded from a snapshot."""
        self._records: List[LinkRecord] = []
        if records is not None:
            self.replace(records)

    def __len__(self):
        """Number of offered links."""
        return len(self._records)

    def __iter__(self) -> Iterator[LinkRecord]:
        """Iterate over the offered links in order."""
        return iter(list(self._records))

    def __repr__(self):
        """Show the offered URLs."""
        return f"<LinkRegistry: {[record.get('url') for record in self._records]}>"

    @property
    def records(self) -> Snapshot:
        """Copy of the records, safe to hand to a store."""
        return [dict(record) for record in self._records]

    def insert(self, record: LinkRecord, absolute_position: Optional[int] = None):
        """Append `record`, or splice it in at the 1-based `absolute_position`."""
        if absolute_position and absolute_position > 0:
            self._records.insert(absolute_position - 1, record)
        else:
            self._records.append(record)

    def exists(self, display_name: Optional[str] = None, url: Optional[str] = None) -> bool:
        """Return True if a record matches by display name and/or URL."""
        return any(record_matches(record, display_name, url) for record in self._records)

    def remove(self, key: str) -> int:
        """Remove every record whose display name or URL equals `key`.

        Returns:
            int: the number of removed records.
        """
        kept = [record for record in self._records if key not in (record.get("display_name"), record.get("url"))]
        removed = len(self._records) - len(kept)
        self._records = kept
        return removed

    def clear(self):
        """Forget every offered link."""
        self._records = []

    def replace(self, records: Iterable[LinkRecord]):
        """Replace the whole registry with the given snapshot."""
        self._records = [dict(record) for record in records]
