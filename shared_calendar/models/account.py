"""
Account model
"""

from typing import List, Optional

from shared_calendar.models.account_type import AccountType, can_promote, can_promote_any
from shared_calendar.models.event import Event, When
from shared_calendar.models.event_index import EventIndex
from shared_calendar.models.priority import Priority


class Account:
    """A calendar account and the events it promotes or is invited to"""

    def __init__(self, name: str, account_type: AccountType):
        self._name = name
        self._type = account_type
        self.events = EventIndex()

    def __repr__(self) -> str:
        return f"Account(name={self._name!r}, type={self._type.value!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> AccountType:
        return self._type

    def is_staff(self) -> bool:
        return self._type is AccountType.STAFF

    def can_promote(self, priority: Priority) -> bool:
        return can_promote(self._type, priority)

    def can_promote_any(self) -> bool:
        return can_promote_any(self._type)

    # Promoting

    def promote(self, event: Event) -> None:
        """Take ownership of a new event and accept it"""
        event.promoter_name = self._name
        self.events.add(event, self._name)

    def promoted_event(self, event_name: str) -> Optional[Event]:
        return self.events.find_promoted(self._name, event_name)

    def has_promoted(self, event_name: str) -> bool:
        return self.promoted_event(event_name) is not None

    # Invitations

    def invite_to(self, event: Event) -> None:
        """Record an unanswered invitation"""
        event.add_invited(self._name)
        self.events.add(event)

    def accept(self, event: Event) -> None:
        event.add_invited(self._name)
        event.add_accepted(self._name)
        self.events.add(event)

    def reject(self, event: Event) -> None:
        event.add_invited(self._name)
        event.add_rejected(self._name)
        self.events.add(event)

    def invitation(self, promoter_name: str, event_name: str) -> Optional[Event]:
        return self.events.find_invited(self._name, promoter_name, event_name)

    def is_on_invitation_list(self, promoter_name: str, event_name: str) -> bool:
        return self.invitation(promoter_name, event_name) is not None

    def has_responded(self, promoter_name: str, event_name: str) -> bool:
        event = self.invitation(promoter_name, event_name)
        return event is not None and event.has_responded(self._name)

    # Calendar queries

    def is_busy_on(self, when: When) -> bool:
        return self.events.has_on_date(when, self._name)

    def has_high_on_date(self, reference: Event) -> bool:
        return self.events.has_high_on_date(reference, self._name)

    def conflicts_with(self, reference: Event) -> List[Event]:
        """Every non-rejected event colliding with the reference"""
        return self.events.list_conflicting(reference, self._name)

    def invited_conflicts_with(self, reference: Event) -> List[Event]:
        """Colliding invitations from other promoters"""
        invited = self.events.invited(self._name)
        return [
            event
            for event in invited.list_conflicting(reference, self._name)
            if not event.is_promoter(self._name)
        ]

    def drop_event(self, event: Event) -> None:
        self.events.discard(event)
