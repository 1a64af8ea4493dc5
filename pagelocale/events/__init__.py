"""In-process event notifications.

Usage:

    from pagelocale.events import Event, EventDispatcher

    dispatcher = EventDispatcher()

    @dispatcher.register("locale.changed")
    def handle_locale_changed(event: Event) -> None:
        rebuild_menu(event.metadata["locale"])

    dispatcher.dispatch(Event(event_type="locale.changed", metadata={"locale": "fa"}))
"""

from pagelocale.events.dispatcher import EventDispatcher
from pagelocale.events.models import Event

__all__ = ["Event", "EventDispatcher"]
