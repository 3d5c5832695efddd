"""
Event Bus for Decoupled Service Communication

This module provides an event bus for publishing and subscribing to events.
Events carry side effects that must not block or fail the request that
triggered them (activity logs, outgoing email). Handlers run synchronously;
an exception raised by a handler is logged and never reaches the publisher.
"""
from typing import List, Callable, Dict, Type
from abc import ABC
import logging

logger = logging.getLogger(__name__)


class Event(ABC):
    """Base event class - all events inherit from this"""
    pass


class EventBus:
    """Event bus for decoupled service communication"""
    
    def __init__(self):
        self._subscribers: Dict[Type[Event], List[Callable]] = {}
        logger.info("Event bus initialized")
    
    def subscribe(self, event_type: Type[Event], handler: Callable):
        """
        Subscribe to an event type
        
        Args:
            event_type: The event class to subscribe to
            handler: Callable that handles the event
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)
        logger.debug(f"Subscribed handler {getattr(handler, '__name__', repr(handler))} to {event_type.__name__}")
    
    def publish(self, event: Event):
        """
        Publish an event to all subscribers
        
        Args:
            event: Event instance to publish
        """
        event_type = type(event)
        if event_type in self._subscribers:
            for handler in self._subscribers[event_type]:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(
                        f"Error handling event {event_type.__name__} in {getattr(handler, '__name__', repr(handler))}: {e}",
                        exc_info=True
                    )
        else:
            logger.debug(f"No subscribers for event {event_type.__name__}")
