# -*- coding: utf-8 -*-
"""
Event Bus Module - Publish-Subscribe Pattern Implementation

Fans out generation diagnostics and progress to interested listeners
(CLI output, host notification layer, tests).

Design Notes:
- Pure Python, no host or UI dependency
- One bus per container; there is no process-wide instance
"""

from typing import Dict, Callable, Any
from enum import Enum
import threading
import uuid
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event type enumeration"""

    # Run lifecycle
    GENERATION_STARTED = "generation_started"
    TIER_COMPLETED = "tier_completed"
    GENERATION_COMPLETED = "generation_completed"

    # Diagnostics
    ERROR_RECORDED = "error_recorded"
    WARNING_RECORDED = "warning_recorded"


class EventBus:
    """
    Event Bus

    Provides a publish-subscribe event system. Callbacks run on the
    publishing thread, in subscription order.

    Usage example:
        event_bus = EventBus()

        def on_error(message):
            logger.info("Diagnostic: %s", message)

        sub_id = event_bus.subscribe(EventType.ERROR_RECORDED, on_error)
        event_bus.publish_sync(EventType.ERROR_RECORDED, "Invalid hex color: #XYZ")
        event_bus.unsubscribe(sub_id)
    """

    def __init__(self):
        self._subscribers: Dict[EventType, Dict[str, Callable]] = {}
        self._sub_lock = threading.Lock()

    def subscribe(
        self,
        event_type: EventType,
        callback: Callable[[Any], None]
    ) -> str:
        """
        Subscribe to event

        Args:
            event_type: Event type
            callback: Callback function, receiving event data as an argument

        Returns:
            str: Subscription ID, used for unsubscription
        """
        subscription_id = str(uuid.uuid4())

        with self._sub_lock:
            if event_type not in self._subscribers:
                self._subscribers[event_type] = {}
            self._subscribers[event_type][subscription_id] = callback

        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Unsubscribe

        Args:
            subscription_id: The ID returned when subscribing

        Returns:
            bool: Whether the unsubscription was successful
        """
        with self._sub_lock:
            for event_type in self._subscribers:
                if subscription_id in self._subscribers[event_type]:
                    del self._subscribers[event_type][subscription_id]
                    return True
        return False

    def publish_sync(self, event_type: EventType, data: Any = None) -> None:
        """Publish event synchronously in the current thread"""
        with self._sub_lock:
            callbacks = list(self._subscribers.get(event_type, {}).values())

        for callback in callbacks:
            self._safe_call(callback, data)

    def _safe_call(self, callback: Callable, data: Any) -> None:
        """Safely call a callback function"""
        try:
            callback(data)
        except Exception as e:
            # Do not publish here: an error event could loop back into the same callback
            logger.error("Event callback execution error: %s", e)

    def subscriber_count(self, event_type: EventType) -> int:
        with self._sub_lock:
            return len(self._subscribers.get(event_type, {}))

    def clear(self) -> None:
        """Clear all subscriptions"""
        with self._sub_lock:
            self._subscribers.clear()

    def shutdown(self) -> None:
        """Shutdown the event bus"""
        self.clear()
        logger.debug("Event bus shut down")
