"""
Registry of every account in the calendar
"""

import logging
from typing import Dict, Iterable, List, Optional

from shared_calendar.models.account import Account
from shared_calendar.models.account_type import AccountType
from shared_calendar.models.event import Event
from shared_calendar.models.ranking import EventRanking

logger = logging.getLogger(__name__)


class Directory:
    """Owns all accounts, keyed by their unique name"""

    def __init__(self):
        self._accounts: Dict[str, Account] = {}

    def exists(self, name: str) -> bool:
        return name in self._accounts

    def get(self, name: str) -> Optional[Account]:
        return self._accounts.get(name)

    def add(self, name: str, account_type: AccountType) -> Account:
        account = Account(name, account_type)
        self._accounts[name] = account
        return account

    def sorted_accounts(self) -> List[Account]:
        return [self._accounts[name] for name in sorted(self._accounts)]

    def remove_event_everywhere(self, event: Event) -> None:
        """Strip an event from every account and orphan it"""
        for account in self._accounts.values():
            if event in account.events:
                account.drop_event(event)
        logger.debug(f"Event {event.name} promoted by {event.promoter_name} removed from all calendars")
        event.promoter_name = None

    def has_event_with_topic(self, topics: Iterable[str]) -> bool:
        topics = list(topics)
        return any(account.events.has_topic(topics) for account in self._accounts.values())

    def events_with_topics(self, topics: Iterable[str]) -> List[Event]:
        """Ranked events across all accounts covering any of the topics"""
        topics = list(topics)
        found: List[Event] = []
        for account in self._accounts.values():
            for event in account.events.events_with_topics(topics):
                if not any(held is event for held in found):
                    found.append(event)
        return EventRanking(topics).rank(found)
