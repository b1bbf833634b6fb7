"""
Event model
"""

import calendar
from dataclasses import dataclass
from typing import Iterable, List, Optional

from shared_calendar.models.priority import NO_ANSWER, InvitationResponse, Priority


@dataclass(frozen=True, order=True)
class When:
    """Date-hour slot of an event"""

    year: int
    month: int
    day: int
    hour: int

    @classmethod
    def parse(cls, year: int, month: int, day: int, hour: int) -> Optional["When"]:
        """Build a slot, returning None for dates that do not exist"""
        if not 1 <= month <= 12:
            return None
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            return None
        if not 0 <= hour <= 23:
            return None
        return cls(year, month, day, hour)

    def __str__(self) -> str:
        return f"{self.day}-{self.month:02d}-{self.year} {self.hour}h"


class Event:
    """A scheduled event and its invitation rosters"""

    def __init__(self, name: str, priority: Priority, when: When, topics: Iterable[str]):
        self.name = name
        self.priority = priority
        self.when = when
        self.topics: List[str] = list(topics)
        self.promoter_name: Optional[str] = None

        # Insertion ordered, no duplicates
        self.invited: List[str] = []
        self.accepted: List[str] = []
        self.rejected: List[str] = []

    def __repr__(self) -> str:
        return f"Event(name={self.name!r}, promoter={self.promoter_name!r}, when={self.when})"

    # Roster mutations

    def add_invited(self, acc_name: str) -> None:
        if acc_name not in self.invited:
            self.invited.append(acc_name)

    def add_accepted(self, acc_name: str) -> None:
        if acc_name in self.rejected:
            self.rejected.remove(acc_name)
        if acc_name not in self.accepted:
            self.accepted.append(acc_name)

    def add_rejected(self, acc_name: str) -> None:
        if acc_name in self.accepted:
            self.accepted.remove(acc_name)
        if acc_name not in self.rejected:
            self.rejected.append(acc_name)

    # Queries

    def is_promoter(self, acc_name: str) -> bool:
        return self.promoter_name is not None and self.promoter_name == acc_name

    def is_invited(self, acc_name: str) -> bool:
        return acc_name in self.invited

    def is_accepted(self, acc_name: str) -> bool:
        return acc_name in self.accepted

    def is_rejected(self, acc_name: str) -> bool:
        return acc_name in self.rejected

    def has_responded(self, acc_name: str) -> bool:
        return self.is_accepted(acc_name) or self.is_rejected(acc_name)

    def is_committed(self, acc_name: str) -> bool:
        """Whether the account promotes or has accepted this event"""
        return self.is_promoter(acc_name) or self.is_accepted(acc_name)

    def is_high_priority(self) -> bool:
        return self.priority is Priority.HIGH

    def response_of(self, acc_name: str) -> str:
        """Answer recorded for an invitee: accept, reject or no_answer"""
        if self.is_accepted(acc_name):
            return InvitationResponse.ACCEPT.value
        if self.is_rejected(acc_name):
            return InvitationResponse.REJECT.value
        return NO_ANSWER

    # Status counters

    @property
    def invited_count(self) -> int:
        return len(self.invited)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def unanswered_count(self) -> int:
        return sum(1 for name in self.invited if not self.has_responded(name))

    # Topics

    def has_topic(self, topic: str) -> bool:
        return topic in self.topics

    def matching_topic_count(self, query_topics: Iterable[str]) -> int:
        """Count query topics present on this event, once per query entry"""
        return sum(1 for topic in query_topics if topic in self.topics)
