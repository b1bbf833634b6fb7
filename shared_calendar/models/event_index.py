"""
Per-account event store
"""

from typing import Dict, Iterable, List, Optional, Tuple

from shared_calendar.models.event import Event, When

EventKey = Tuple[Optional[str], str]


class EventIndex:
    """Ordered collection of the events an account promotes or is invited to.

    Events are shared objects: the same instance sits in the promoter's index
    and in every invitee's index, so roster changes are seen by all holders.
    Membership is by identity, never by equality of fields.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._events: List[Event] = []
        self._by_key: Dict[EventKey, Event] = {}
        for event in events:
            self.add(event)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event: object) -> bool:
        return any(held is event for held in self._events)

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    def add(self, event: Event, acting_promoter_name: Optional[str] = None) -> None:
        """Hold an event; a promoter adding its own event accepts it at once"""
        if event not in self:
            self._events.append(event)
        self._by_key[(event.promoter_name, event.name)] = event
        if acting_promoter_name is not None and event.is_promoter(acting_promoter_name):
            event.add_invited(acting_promoter_name)
            event.add_accepted(acting_promoter_name)

    def remove(self, event_name: str, promoter_name: Optional[str] = None) -> None:
        """Drop events with this name, optionally only those of one promoter"""
        for event in self._events:
            if event.name != event_name:
                continue
            if promoter_name is not None and event.promoter_name != promoter_name:
                continue
            self.discard(event)

    def discard(self, event: Event) -> None:
        self._events = [held for held in self._events if held is not event]
        self._by_key = {key: held for key, held in self._by_key.items() if held is not event}

    # Lookups

    def find_promoted(self, promoter_name: str, event_name: str) -> Optional[Event]:
        event = self._by_key.get((promoter_name, event_name))
        if event is not None and event.is_promoter(promoter_name):
            return event
        return None

    def find_invited(self, invitee_name: str, promoter_name: str, event_name: str) -> Optional[Event]:
        event = self._by_key.get((promoter_name, event_name))
        if event is not None and event.is_invited(invitee_name):
            return event
        return None

    # Projections

    def promoted(self, acc_name: str) -> "EventIndex":
        """Events this account promotes"""
        return EventIndex(event for event in self._events if event.is_promoter(acc_name))

    def invited(self, acc_name: str) -> "EventIndex":
        """Events this account is on the invitation list of"""
        return EventIndex(event for event in self._events if event.is_invited(acc_name))

    # Date conflicts

    def has_on_date(self, when: When, acc_name: str) -> bool:
        """Whether the account promotes or accepted an event at this date-hour"""
        return any(event.when == when and event.is_committed(acc_name) for event in self._events)

    def has_high_on_date(self, reference: Event, acc_name: str) -> bool:
        return any(
            event.when == reference.when
            and event.is_committed(acc_name)
            and event.is_high_priority()
            for event in self._events
        )

    def list_conflicting(self, reference: Event, acc_name: str) -> List[Event]:
        """Events colliding with the reference event on the account's calendar.

        Events the account rejected never collide. Same date-hour is required;
        a same-named event only collides when another account promotes it.
        """
        conflicting: List[Event] = []
        for event in self._events:
            if event is reference or event.is_rejected(acc_name):
                continue
            if event.when != reference.when:
                continue
            if event.name == reference.name and event.promoter_name == reference.promoter_name:
                continue
            conflicting.append(event)
        return conflicting

    # Topics

    def has_topic(self, topics: Iterable[str]) -> bool:
        topics = list(topics)
        return any(event.has_topic(topic) for event in self._events for topic in topics)

    def events_with_topics(self, topics: Iterable[str]) -> List[Event]:
        """Held events covering at least one of the topics, in holding order"""
        topics = list(topics)
        return [event for event in self._events if any(event.has_topic(topic) for topic in topics)]
