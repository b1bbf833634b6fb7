"""
Scheduling and invitation service
"""

import logging
from threading import RLock
from typing import Dict, Iterable, List, Optional

from shared_calendar.models import (
    Account,
    AccountType,
    Directory,
    Event,
    InvitationResponse,
    Priority,
    When,
)
from shared_calendar.services.outcomes import CascadeAction, CascadeEffect, Outcome, Reason

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """Registers accounts, schedules events and resolves invitations.

    Every operation validates all of its preconditions before touching any
    state and reports a failed Outcome when one does not hold. The engine is
    not thread safe by itself; callers sharing it hold ``lock`` around each
    operation.
    """

    def __init__(self, directory: Optional[Directory] = None):
        self.directory = directory if directory is not None else Directory()
        self.lock = RLock()

    # Accounts

    def register(self, name: str, type_token: str) -> Outcome:
        """Register a new account"""
        if self.directory.exists(name):
            return self._reject(Reason.ACCOUNT_EXISTS, f"Account {name} already exists.")

        account_type = AccountType.classify(type_token)
        if account_type is None:
            return self._reject(Reason.INVALID_TYPE, "Unknown account type.")

        account = self.directory.add(name, account_type)
        logger.info(f"Registered {account_type.value} account {name}")
        return Outcome.success(f"{name} was registered.", data=self._account_data(account))

    def list_accounts(self) -> Outcome:
        """All accounts sorted by name"""
        accounts = self.directory.sorted_accounts()
        if not accounts:
            return Outcome.success("No account registered.", data=[])
        return Outcome.success("All accounts:", data=[self._account_data(acc) for acc in accounts])

    def account_events(self, name: str) -> Outcome:
        """Events an account promotes or is invited to, with their counters"""
        account = self.directory.get(name)
        if account is None:
            return self._account_missing(name)

        events = account.events.events
        if not events:
            return Outcome.success(f"Account {name} has no events.", data=[])
        return Outcome.success(
            f"Account {name} events:",
            data=[self._event_summary(event) for event in events],
        )

    # Events

    def create_event(
        self,
        promoter_name: str,
        event_name: str,
        priority_token: str,
        year: int,
        month: int,
        day: int,
        hour: int,
        topics: Iterable[str],
    ) -> Outcome:
        """Schedule a new event promoted by an account"""
        promoter = self.directory.get(promoter_name)
        if promoter is None:
            return self._account_missing(promoter_name)

        priority = Priority.parse(priority_token)
        if priority is None:
            return self._reject(Reason.INVALID_PRIORITY, "Unknown priority type.")

        if not promoter.can_promote_any():
            return self._reject(
                Reason.GUEST_FORBIDDEN,
                f"Guest account {promoter_name} cannot create events.",
            )

        if not promoter.can_promote(priority):
            return self._reject(
                Reason.STAFF_HIGH_FORBIDDEN,
                f"Account {promoter_name} cannot create {priority.value} priority events.",
            )

        if promoter.has_promoted(event_name):
            return self._reject(
                Reason.EVENT_EXISTS,
                f"{event_name} already exists in account {promoter_name}.",
            )

        when = When.parse(year, month, day, hour)
        if when is None:
            return self._reject(Reason.INVALID_DATE, "Invalid date.")

        if promoter.is_busy_on(when):
            return self._reject(Reason.BUSY_ON_DATE, f"Account {promoter_name} is busy.")

        event = Event(event_name, priority, when, topics)
        promoter.promote(event)
        logger.info(f"Scheduled {priority.value} event {event_name} by {promoter_name} on {when}")

        # Pending invitations at the same slot are turned down
        cascade = []
        for pending in promoter.invited_conflicts_with(event):
            pending.add_rejected(promoter_name)
            cascade.append(self._effect(CascadeAction.REJECTED, pending))
            logger.info(f"{promoter_name} auto-rejected {pending.name} promoted by {pending.promoter_name}")

        return Outcome.success(
            f"{event_name} is scheduled.",
            data=self._event_summary(event),
            cascade=cascade,
        )

    def event_detail(self, promoter_name: str, event_name: str) -> Outcome:
        """Date-hour of an event and the answer of every invitee"""
        if not self.directory.exists(promoter_name):
            return self._account_missing(promoter_name)

        event = self._find_event(promoter_name, event_name)
        if event is None:
            return self._event_missing(promoter_name, event_name)

        data = {
            "name": event.name,
            "promoter": event.promoter_name,
            "priority": event.priority.value,
            "when": self._when_data(event.when),
            "topics": list(event.topics),
            "invitees": [
                {"name": name, "status": event.response_of(name)}
                for name in event.invited
            ],
        }
        return Outcome.success(f"{event.name} occurs on {event.when}:", data=data)

    # Invitations

    def invite(self, promoter_name: str, event_name: str, invitee_name: str) -> Outcome:
        """Invite an account to an event.

        A staff member invited to a high priority event attends it right away:
        conflicting events the invitee promotes are removed from every
        calendar and conflicting invitations are rejected. The invitation is
        refused when the invitee already attends another high priority event
        at that time. Everyone else only gets an unanswered invitation, unless
        they are already busy at that time.
        """
        if not self.directory.exists(promoter_name):
            return self._account_missing(promoter_name)

        invitee = self.directory.get(invitee_name)
        if invitee is None:
            return self._account_missing(invitee_name)

        event = self._find_event(promoter_name, event_name)
        if event is None:
            return self._event_missing(promoter_name, event_name)

        if invitee.is_on_invitation_list(promoter_name, event_name):
            return self._reject(
                Reason.ALREADY_INVITED,
                f"Account {invitee_name} was already invited.",
            )

        if invitee.is_staff() and event.is_high_priority():
            if invitee.has_high_on_date(event):
                return self._already_attending(invitee_name)
            return self._escalate(invitee, event)

        if invitee.is_busy_on(event.when):
            return self._already_attending(invitee_name)

        invitee.invite_to(event)
        logger.info(f"{invitee_name} invited to {event_name} promoted by {promoter_name}")
        return Outcome.success(f"{invitee_name} was invited.", data=self._event_summary(event))

    def respond(
        self,
        invitee_name: str,
        promoter_name: str,
        event_name: str,
        response_token: str,
    ) -> Outcome:
        """Record an invitee's answer to an invitation"""
        if not self.directory.exists(promoter_name):
            return self._account_missing(promoter_name)

        invitee = self.directory.get(invitee_name)
        if invitee is None:
            return self._account_missing(invitee_name)

        response = InvitationResponse.parse(response_token)
        if response is None:
            return self._reject(Reason.INVALID_RESPONSE, "Unknown event response.")

        event = self._find_event(promoter_name, event_name)
        if event is None:
            return self._event_missing(promoter_name, event_name)

        if not invitee.is_on_invitation_list(promoter_name, event_name):
            return self._reject(
                Reason.NOT_INVITED,
                f"Account {invitee_name} is not on the invitation list.",
            )

        if invitee.has_responded(promoter_name, event_name):
            return self._reject(
                Reason.ALREADY_RESPONDED,
                f"Account {invitee_name} has already responded.",
            )

        message = f"Account {invitee_name} has replied {response.value} to the invitation."

        if response is InvitationResponse.REJECT:
            invitee.reject(event)
            logger.info(f"{invitee_name} rejected {event_name} promoted by {promoter_name}")
            return Outcome.success(message, data=self._event_summary(event))

        cascade = []
        for other in invitee.invited_conflicts_with(event):
            other.add_rejected(invitee_name)
            cascade.append(self._effect(CascadeAction.REJECTED, other))
            logger.info(f"{invitee_name} auto-rejected {other.name} promoted by {other.promoter_name}")

        invitee.accept(event)
        logger.info(f"{invitee_name} accepted {event_name} promoted by {promoter_name}")
        return Outcome.success(message, data=self._event_summary(event), cascade=cascade)

    # Topics

    def search_topics(self, topics: Iterable[str]) -> Outcome:
        """Events covering any of the topics, most relevant first"""
        topics = list(topics)
        if not self.directory.has_event_with_topic(topics):
            return Outcome.success("No events on those topics.", data=[])

        events = self.directory.events_with_topics(topics)
        data = [
            {
                "name": event.name,
                "promoter": event.promoter_name,
                "topics": list(event.topics),
                "matching_topics": event.matching_topic_count(topics),
            }
            for event in events
        ]
        return Outcome.success(f"Events on topics {' '.join(topics)}:", data=data)

    # Internals

    def _escalate(self, invitee: Account, event: Event) -> Outcome:
        cascade: List[CascadeEffect] = []
        for other in invitee.conflicts_with(event):
            if other.is_promoter(invitee.name):
                cascade.append(self._effect(CascadeAction.REMOVED, other))
                self.directory.remove_event_everywhere(other)
                logger.info(f"{other.name} promoted by {invitee.name} removed for {event.name}")
            else:
                other.add_rejected(invitee.name)
                cascade.append(self._effect(CascadeAction.REJECTED, other))
                logger.info(f"{invitee.name} auto-rejected {other.name} promoted by {other.promoter_name}")

        invitee.accept(event)
        logger.info(f"{invitee.name} accepted {event.name} promoted by {event.promoter_name}")
        return Outcome.success(
            f"{invitee.name} accepted the invitation.",
            data=self._event_summary(event),
            cascade=cascade,
        )

    def _find_event(self, promoter_name: str, event_name: str) -> Optional[Event]:
        promoter = self.directory.get(promoter_name)
        if promoter is None:
            return None
        return promoter.promoted_event(event_name)

    def _reject(self, reason: Reason, message: str) -> Outcome:
        logger.debug(f"Request refused ({reason.value}): {message}")
        return Outcome.fail(reason, message)

    def _account_missing(self, name: str) -> Outcome:
        return self._reject(Reason.ACCOUNT_NOT_FOUND, f"Account {name} does not exist.")

    def _event_missing(self, promoter_name: str, event_name: str) -> Outcome:
        return self._reject(
            Reason.EVENT_NOT_FOUND,
            f"{event_name} does not exist in account {promoter_name}.",
        )

    def _already_attending(self, invitee_name: str) -> Outcome:
        return self._reject(
            Reason.ALREADY_ATTENDING,
            f"Account {invitee_name} already attending another event.",
        )

    @staticmethod
    def _effect(action: CascadeAction, event: Event) -> CascadeEffect:
        return CascadeEffect(action=action, event_name=event.name, promoter_name=event.promoter_name)

    @staticmethod
    def _account_data(account: Account) -> Dict:
        return {"name": account.name, "type": account.type.value}

    @staticmethod
    def _when_data(when: When) -> Dict:
        return {"year": when.year, "month": when.month, "day": when.day, "hour": when.hour}

    def _event_summary(self, event: Event) -> Dict:
        return {
            "name": event.name,
            "promoter": event.promoter_name,
            "priority": event.priority.value,
            "when": self._when_data(event.when),
            "topics": list(event.topics),
            "invited": event.invited_count,
            "accepted": event.accepted_count,
            "rejected": event.rejected_count,
            "unanswered": event.unanswered_count,
        }
