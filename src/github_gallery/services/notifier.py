"""Change notification for state held by services."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

_logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@dataclass
class ChangeNotifier:
    """Ordered list of listeners called whenever observed state changes."""

    _listeners: list[Listener] = field(default_factory=list)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        """Call every listener; a failing listener does not stop the rest."""
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                _logger.exception("Change listener failed")
