"""
Tests for the scheduling engine: registration, events, invitations and cascades
"""

import pytest

from shared_calendar.services.outcomes import Reason
from shared_calendar.services.scheduling_engine import SchedulingEngine

DATE = (2024, 5, 10, 18)
LATER = (2024, 5, 10, 20)

@pytest.fixture
def engine():
    """Engine with a manager, two staff members and a guest"""
    engine = SchedulingEngine()
    for name, acc_type in [("alice", "manager"), ("bob", "staff"), ("carol", "manager"),
                           ("dave", "staff"), ("gus", "guest")]:
        assert engine.register(name, acc_type).ok
    return engine

@pytest.fixture
def party(engine):
    """alice's mid priority Party"""
    outcome = engine.create_event("alice", "Party", "mid", *DATE, ["music", "food"])
    assert outcome.ok
    return outcome

def statuses(engine, promoter, event_name):
    detail = engine.event_detail(promoter, event_name)
    assert detail.ok
    return {item["name"]: item["status"] for item in detail.data["invitees"]}

# Registration

def test_register_and_list_sorted():
    """Scenario: accounts are listed alphabetically with their type"""
    engine = SchedulingEngine()
    assert engine.list_accounts().message == "No account registered."

    assert engine.register("bob", "staff").message == "bob was registered."
    assert engine.register("alice", "manager").message == "alice was registered."

    listing = engine.list_accounts()
    assert listing.message == "All accounts:"
    assert listing.data == [
        {"name": "alice", "type": "manager"},
        {"name": "bob", "type": "staff"},
    ]

def test_register_duplicate(engine):
    """Registering a taken name is refused and keeps the original account"""
    outcome = engine.register("alice", "staff")

    assert not outcome.ok
    assert outcome.reason is Reason.ACCOUNT_EXISTS
    assert outcome.message == "Account alice already exists."
    assert engine.directory.get("alice").type.value == "manager"

def test_register_unknown_type(engine):
    """Unknown account types are refused"""
    outcome = engine.register("zed", "boss")

    assert outcome.reason is Reason.INVALID_TYPE
    assert outcome.message == "Unknown account type."
    assert not engine.directory.exists("zed")

# Event creation

def test_create_event_schedules_and_self_accepts(engine, party):
    """Scenario: the promoter is invited and accepted on creation"""
    assert party.message == "Party is scheduled."
    assert statuses(engine, "alice", "Party") == {"alice": "accept"}

    events = engine.account_events("alice")
    assert events.message == "Account alice events:"
    assert events.data[0]["invited"] == 1
    assert events.data[0]["accepted"] == 1
    assert events.data[0]["unanswered"] == 0

@pytest.mark.parametrize("promoter,priority,reason,message", [
    ("zed", "mid", Reason.ACCOUNT_NOT_FOUND, "Account zed does not exist."),
    ("alice", "low", Reason.INVALID_PRIORITY, "Unknown priority type."),
    ("gus", "mid", Reason.GUEST_FORBIDDEN, "Guest account gus cannot create events."),
    ("bob", "high", Reason.STAFF_HIGH_FORBIDDEN, "Account bob cannot create high priority events."),
])
def test_create_event_refused(engine, promoter, priority, reason, message):
    """Scenario: permission and token failures create nothing"""
    outcome = engine.create_event(promoter, "Meeting", priority, *DATE, ["work"])

    assert not outcome.ok
    assert outcome.reason is reason
    assert outcome.message == message
    assert engine.search_topics(["work"]).data == []

def test_create_event_duplicate_name(engine, party):
    """A promoter cannot reuse an event name"""
    outcome = engine.create_event("alice", "Party", "mid", *LATER, [])

    assert outcome.reason is Reason.EVENT_EXISTS
    assert outcome.message == "Party already exists in account alice."

def test_same_name_allowed_for_other_promoters(engine, party):
    """Event names are unique per promoter only"""
    assert engine.create_event("carol", "Party", "mid", *DATE, []).ok

def test_create_event_busy(engine, party):
    """A promoter committed at that slot cannot create another event there"""
    outcome = engine.create_event("alice", "Other", "high", *DATE, [])

    assert outcome.reason is Reason.BUSY_ON_DATE
    assert outcome.message == "Account alice is busy."

def test_create_event_invalid_date(engine):
    """Impossible dates are refused without creating an event"""
    outcome = engine.create_event("alice", "Party", "mid", 2023, 2, 30, 10, [])

    assert outcome.reason is Reason.INVALID_DATE
    assert engine.account_events("alice").data == []

def test_create_event_rejects_pending_invitations_on_date(engine, party):
    """Promoting an event turns down unanswered invitations at the same slot"""
    assert engine.invite("alice", "Party", "bob").ok

    outcome = engine.create_event("bob", "Standup", "mid", *DATE, [])

    assert outcome.ok
    assert [effect.describe() for effect in outcome.cascade] == ["Party promoted by alice was rejected."]
    assert statuses(engine, "alice", "Party")["bob"] == "reject"
    assert statuses(engine, "bob", "Standup") == {"bob": "accept"}

# Invitations

def test_invite_records_unanswered(engine, party):
    """Invitation list membership appears on invite and survives the answer"""
    bob = engine.directory.get("bob")
    assert not bob.is_on_invitation_list("alice", "Party")

    outcome = engine.invite("alice", "Party", "bob")

    assert outcome.message == "bob was invited."
    assert bob.is_on_invitation_list("alice", "Party")
    assert statuses(engine, "alice", "Party")["bob"] == "no_answer"

    engine.respond("bob", "alice", "Party", "reject")
    assert bob.is_on_invitation_list("alice", "Party")

@pytest.mark.parametrize("promoter,event_name,invitee,reason", [
    ("zed", "Party", "bob", Reason.ACCOUNT_NOT_FOUND),
    ("alice", "Party", "zed", Reason.ACCOUNT_NOT_FOUND),
    ("alice", "Missing", "bob", Reason.EVENT_NOT_FOUND),
    ("carol", "Party", "bob", Reason.EVENT_NOT_FOUND),
])
def test_invite_refused(engine, party, promoter, event_name, invitee, reason):
    """Unknown accounts and events are refused"""
    assert engine.invite(promoter, event_name, invitee).reason is reason

def test_invite_twice(engine, party):
    """An account cannot be invited twice to the same event"""
    engine.invite("alice", "Party", "bob")
    outcome = engine.invite("alice", "Party", "bob")

    assert outcome.reason is Reason.ALREADY_INVITED
    assert outcome.message == "Account bob was already invited."

def test_invite_promoter_to_own_event(engine, party):
    """The promoter already counts as invited to its own event"""
    assert engine.invite("alice", "Party", "alice").reason is Reason.ALREADY_INVITED

def test_invite_busy_invitee(engine, party):
    """An account committed elsewhere at that time cannot be invited"""
    engine.create_event("carol", "Dinner", "mid", *DATE, [])
    engine.invite("carol", "Dinner", "bob")
    engine.respond("bob", "carol", "Dinner", "accept")

    outcome = engine.invite("alice", "Party", "bob")

    assert outcome.reason is Reason.ALREADY_ATTENDING
    assert outcome.message == "Account bob already attending another event."
    assert not engine.directory.get("bob").is_on_invitation_list("alice", "Party")

def test_manager_invited_to_high_event_is_not_escalated(engine, party):
    """Only staff members are pulled into high priority events"""
    engine.create_event("carol", "Summit", "high", *DATE, [])

    outcome = engine.invite("carol", "Summit", "alice")

    assert outcome.reason is Reason.ALREADY_ATTENDING
    assert statuses(engine, "alice", "Party") == {"alice": "accept"}

# Responses

def test_accept_invitation(engine, party):
    """Scenario: bob accepts alice's Party"""
    engine.invite("alice", "Party", "bob")

    outcome = engine.respond("bob", "alice", "Party", "accept")

    assert outcome.message == "Account bob has replied accept to the invitation."
    assert statuses(engine, "alice", "Party")["bob"] == "accept"

def test_reject_is_final(engine, party):
    """A rejected invitation cannot be answered again"""
    engine.invite("alice", "Party", "bob")
    assert engine.respond("bob", "alice", "Party", "reject").ok

    for answer in ("accept", "reject"):
        outcome = engine.respond("bob", "alice", "Party", answer)
        assert outcome.reason is Reason.ALREADY_RESPONDED
        assert outcome.message == "Account bob has already responded."
    assert statuses(engine, "alice", "Party")["bob"] == "reject"

@pytest.mark.parametrize("invitee,promoter,event_name,answer,reason", [
    ("bob", "zed", "Party", "accept", Reason.ACCOUNT_NOT_FOUND),
    ("zed", "alice", "Party", "accept", Reason.ACCOUNT_NOT_FOUND),
    ("bob", "alice", "Party", "maybe", Reason.INVALID_RESPONSE),
    ("bob", "alice", "Missing", "accept", Reason.EVENT_NOT_FOUND),
    ("dave", "alice", "Party", "accept", Reason.NOT_INVITED),
])
def test_respond_refused(engine, party, invitee, promoter, event_name, answer, reason):
    """Invalid answers leave the invitation unanswered"""
    engine.invite("alice", "Party", "bob")

    outcome = engine.respond(invitee, promoter, event_name, answer)

    assert outcome.reason is reason
    assert statuses(engine, "alice", "Party")["bob"] == "no_answer"

def test_promoter_has_already_responded(engine, party):
    """The promoter already counts as having accepted"""
    assert engine.respond("alice", "alice", "Party", "reject").reason is Reason.ALREADY_RESPONDED

def test_accept_rejects_conflicting_invitations(engine, party):
    """Accepting one invitation turns down the others at the same slot"""
    engine.create_event("carol", "Dinner", "mid", *DATE, [])
    engine.create_event("carol", "Brunch", "mid", *LATER, [])
    for promoter, event_name in [("alice", "Party"), ("carol", "Dinner"), ("carol", "Brunch")]:
        engine.invite(promoter, event_name, "bob")

    outcome = engine.respond("bob", "alice", "Party", "accept")

    assert [effect.describe() for effect in outcome.cascade] == ["Dinner promoted by carol was rejected."]
    assert statuses(engine, "carol", "Dinner")["bob"] == "reject"
    assert statuses(engine, "carol", "Brunch")["bob"] == "no_answer"

def test_accept_rejects_namesake_from_other_promoter(engine, party):
    """Same-named events of different promoters collide"""
    engine.create_event("carol", "Party", "mid", *DATE, [])
    engine.invite("alice", "Party", "bob")
    engine.invite("carol", "Party", "bob")

    engine.respond("bob", "carol", "Party", "accept")

    assert statuses(engine, "alice", "Party")["bob"] == "reject"
    assert statuses(engine, "carol", "Party")["bob"] == "accept"

# High priority escalation

def test_high_priority_invite_escalates(engine, party):
    """Scenario: a staff invite to a high event auto-accepts and rejects the mid event"""
    engine.invite("alice", "Party", "bob")
    engine.respond("bob", "alice", "Party", "accept")
    engine.create_event("carol", "Summit", "high", *DATE, ["strategy"])

    outcome = engine.invite("carol", "Summit", "bob")

    assert outcome.message == "bob accepted the invitation."
    assert outcome.lines() == [
        "bob accepted the invitation.",
        "Party promoted by alice was rejected.",
    ]
    assert statuses(engine, "alice", "Party")["bob"] == "reject"
    assert statuses(engine, "carol", "Summit")["bob"] == "accept"

def test_high_priority_invite_removes_promoted_event(engine):
    """A staff member's own event at that slot is removed from every calendar"""
    engine.create_event("bob", "Standup", "mid", *DATE, ["work"])
    engine.invite("bob", "Standup", "dave")
    engine.create_event("carol", "Summit", "high", *DATE, [])

    outcome = engine.invite("carol", "Summit", "bob")

    assert outcome.lines() == [
        "bob accepted the invitation.",
        "Standup promoted by bob was removed.",
    ]
    assert engine.event_detail("bob", "Standup").reason is Reason.EVENT_NOT_FOUND
    assert [e["name"] for e in engine.account_events("bob").data] == ["Summit"]
    assert engine.account_events("dave").data == []
    assert engine.search_topics(["work"]).message == "No events on those topics."

def test_high_priority_invite_rejects_pending_invitations(engine, party):
    """Escalation rejects unanswered invitations at the same slot"""
    engine.invite("alice", "Party", "bob")
    engine.create_event("carol", "Summit", "high", *DATE, [])

    engine.invite("carol", "Summit", "bob")

    assert statuses(engine, "alice", "Party")["bob"] == "reject"

def test_high_priority_invite_refused_when_attending_high(engine):
    """A staff member already at a high event cannot be pulled into another"""
    engine.create_event("alice", "Board", "high", *DATE, [])
    engine.create_event("carol", "Summit", "high", *DATE, [])
    assert engine.invite("alice", "Board", "bob").ok

    outcome = engine.invite("carol", "Summit", "bob")

    assert outcome.reason is Reason.ALREADY_ATTENDING
    assert outcome.cascade == []
    assert not engine.directory.get("bob").is_on_invitation_list("carol", "Summit")
    assert statuses(engine, "alice", "Board")["bob"] == "accept"

def test_escalated_invitee_cannot_respond_again(engine):
    """An auto-accepted invitation cannot be answered again"""
    engine.create_event("carol", "Summit", "high", *DATE, [])
    engine.invite("carol", "Summit", "bob")

    assert engine.respond("bob", "carol", "Summit", "reject").reason is Reason.ALREADY_RESPONDED

# Queries

def test_account_events_counters(engine, party):
    """Event counters reflect invited, accepted, rejected and unanswered"""
    engine.invite("alice", "Party", "bob")
    engine.invite("alice", "Party", "dave")
    engine.respond("dave", "alice", "Party", "reject")

    summary = engine.account_events("alice").data[0]

    assert (summary["invited"], summary["accepted"], summary["rejected"], summary["unanswered"]) == (3, 1, 1, 1)
    assert engine.account_events("bob").data[0]["name"] == "Party"

def test_account_events_empty_and_missing(engine):
    """Accounts without events and unknown accounts are reported"""
    assert engine.account_events("bob").message == "Account bob has no events."
    assert engine.account_events("zed").reason is Reason.ACCOUNT_NOT_FOUND

def test_event_detail(engine, party):
    """Event detail lists invitees in invitation order with their answer"""
    engine.invite("alice", "Party", "bob")

    detail = engine.event_detail("alice", "Party")

    assert detail.message == "Party occurs on 10-05-2024 18h:"
    assert detail.data["invitees"] == [
        {"name": "alice", "status": "accept"},
        {"name": "bob", "status": "no_answer"},
    ]
    assert engine.event_detail("zed", "Party").reason is Reason.ACCOUNT_NOT_FOUND

def test_search_topics(engine):
    """Scenario: topic search before and after an event exists"""
    assert engine.search_topics(["music"]).message == "No events on those topics."

    engine.create_event("alice", "Party", "mid", *DATE, ["music", "food"])
    engine.create_event("carol", "Gig", "mid", *DATE, ["music"])
    engine.create_event("bob", "Lunch", "mid", *LATER, ["food"])

    result = engine.search_topics(["music", "food"])

    assert result.message == "Events on topics music food:"
    assert [(e["name"], e["promoter"], e["matching_topics"]) for e in result.data] == [
        ("Party", "alice", 2),
        ("Gig", "carol", 1),
        ("Lunch", "bob", 1),
    ]
    assert result.data[0]["topics"] == ["music", "food"]
