"""Event dispatcher with an in-process handler registry.

Handlers are registered with a decorator and called synchronously, in
registration order, when an event of their type is dispatched. Each
dispatcher owns its own registry so independent controllers (and tests)
never share observers.
"""

from typing import Any, Callable, Dict, List

from pagelocale.events.models import Event
from pagelocale.logging import get_module_logger

logger = get_module_logger()


class EventDispatcher:
    """Registry of event handlers keyed by event type."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Callable[[Event], Any]]] = {}

    def register(self, event_type: str):
        """Decorator to register an event handler for a specific event type.

        Args:
            event_type: The type of event to handle (e.g., 'locale.changed').

        Returns:
            Decorator function that registers the handler.
        """

        def decorator(handler_func: Callable) -> Callable:
            self._handlers.setdefault(event_type, []).append(handler_func)
            logger.debug(
                "registered_event_handler",
                handler=getattr(handler_func, "__name__", "unknown"),
                event_type=event_type,
                total_handlers=len(self._handlers[event_type]),
            )
            return handler_func

        return decorator

    def dispatch(self, event: Event) -> List[Any]:
        """Dispatch event synchronously to all registered handlers.

        If a handler raises, the exception is logged and the remaining
        handlers still run.

        Args:
            event: The event to dispatch.

        Returns:
            List of return values from the handlers that succeeded.
        """
        results = []
        handlers = self._handlers.get(event.event_type, [])

        logger.info(
            "dispatching_event",
            event_type=event.event_type,
            handler_count=len(handlers),
            correlation_id=str(event.correlation_id),
        )

        for handler in list(handlers):
            try:
                results.append(handler(event))
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    handler=getattr(handler, "__name__", "unknown"),
                    event_type=event.event_type,
                    error=str(e),
                    correlation_id=str(event.correlation_id),
                )

        return results

    def get_registered_events(self) -> List[str]:
        """Get all event types that have registered handlers."""
        return list(self._handlers.keys())

    def get_handlers_for_event(self, event_type: str) -> List[Callable]:
        """Get all handlers registered for a specific event type."""
        return list(self._handlers.get(event_type, []))

    def clear(self) -> None:
        """Remove every registered handler."""
        self._handlers.clear()
        logger.debug("cleared_all_event_handlers")
