"""Cache-then-revalidate orchestration for the gist and image listings."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from github_gallery.domain.gists import Gist
from github_gallery.domain.images import ImageItem
from github_gallery.services.collections import CollectionSource, RecordT
from github_gallery.services.notifier import ChangeNotifier, Listener

_logger = logging.getLogger(__name__)


@dataclass
class GalleryService:
    """Holds the displayed listings and refreshes them from cache then network.

    A single ``is_loading`` flag guards both listings: while either refresh is
    running, another refresh request of any kind is ignored rather than
    queued. Failures never propagate; the previously published data stays in
    place and the error is logged.
    """

    gist_source: CollectionSource[Gist]
    image_source: CollectionSource[ImageItem]
    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)
    gists: list[Gist] = field(default_factory=list)
    images: list[ImageItem] = field(default_factory=list)
    is_loading: bool = False
    last_errors: dict[str, str] = field(default_factory=dict)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state changes."""
        return self.notifier.subscribe(listener)

    async def refresh_gists(self) -> bool:
        """Refresh gists; return False if another refresh is in flight."""
        return await self._refresh(self.gist_source, self._publish_gists)

    async def refresh_images(self) -> bool:
        """Refresh images; return False if another refresh is in flight."""
        return await self._refresh(self.image_source, self._publish_images)

    async def refresh_all(self) -> None:
        """Refresh both listings one after the other."""
        await self.refresh_gists()
        await self.refresh_images()

    async def _refresh(
        self,
        source: CollectionSource[RecordT],
        publish: Callable[[list[RecordT]], None],
    ) -> bool:
        if self.is_loading:
            _logger.info(
                "Refresh of %s skipped: another refresh is running", source.name
            )
            return False
        self.is_loading = True
        self.notifier.notify()

        try:
            cached = await source.load_cached()
            if cached:
                publish(cached)
                self.notifier.notify()

            fresh = await source.fetch_remote()
            publish(fresh)
            await source.store_cache(fresh)
            self.last_errors.pop(source.name, None)
            _logger.info("Refreshed %s: %s records", source.name, len(fresh))
        except Exception as exc:
            self.last_errors[source.name] = str(exc)
            _logger.exception("Error refreshing %s", source.name)
        finally:
            self.is_loading = False
            self.notifier.notify()
        return True

    def _publish_gists(self, records: Sequence[Gist]) -> None:
        self.gists = list(records)

    def _publish_images(self, records: Sequence[ImageItem]) -> None:
        self.images = list(records)
