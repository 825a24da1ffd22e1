"""Bookmark set persisted in the preference store."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from github_gallery.services.collections import RecordT
from github_gallery.services.notifier import ChangeNotifier, Listener
from github_gallery.services.preferences import BOOKMARKS_KEY, KeyValueStore


@dataclass
class BookmarkService:
    """Tracks bookmarked gist and image ids."""

    store: KeyValueStore
    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)
    _bookmarks: set[str] = field(default_factory=set)

    @property
    def bookmarks(self) -> frozenset[str]:
        """Return a snapshot of the bookmarked ids."""
        return frozenset(self._bookmarks)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for bookmark changes."""
        return self.notifier.subscribe(listener)

    async def load(self) -> None:
        """Load the bookmark set from the store."""
        stored = await self.store.get_string_list(BOOKMARKS_KEY)
        self._bookmarks = set(stored or [])
        self.notifier.notify()

    async def toggle(self, item_id: str) -> bool:
        """Flip bookmark membership, persist the set, and return the new state."""
        if item_id in self._bookmarks:
            self._bookmarks.remove(item_id)
        else:
            self._bookmarks.add(item_id)
        await self.store.set_string_list(BOOKMARKS_KEY, sorted(self._bookmarks))
        self.notifier.notify()
        return item_id in self._bookmarks

    def is_bookmarked(self, item_id: str) -> bool:
        """Return True when the id is bookmarked."""
        return item_id in self._bookmarks

    def bookmarked_records(self, records: Sequence[RecordT]) -> list[RecordT]:
        """Filter records down to bookmarked ones, keeping their order."""
        return [record for record in records if record.id in self._bookmarks]
