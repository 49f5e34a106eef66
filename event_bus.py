import logging
import asyncio
import inspect

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self):
        self.listeners = {}

    def subscribe(self, event_type, listener):
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(listener)
        logger.debug(f"Listener subscribed to event '{event_type}'")

    def unsubscribe(self, event_type, listener):
        if listener in self.listeners.get(event_type, []):
            self.listeners[event_type].remove(listener)
            logger.debug(f"Listener unsubscribed from event '{event_type}'")

    def publish(self, event_type, data):
        if event_type in self.listeners:
            for listener in list(self.listeners[event_type]):
                if inspect.iscoroutinefunction(listener):
                    asyncio.create_task(listener(data))
                else:
                    listener(data)
            logger.debug(f"Event '{event_type}' published to {len(self.listeners[event_type])} listeners")
