"""
Ordering of topic search results
"""

from typing import Iterable, List, Tuple

from shared_calendar.models.event import Event


class EventRanking:
    """Ranks events by relevance to a fixed list of query topics.

    More matching topics first, then event name, then promoter name.
    """

    def __init__(self, topics: Iterable[str]):
        self.topics = list(topics)

    def key(self, event: Event) -> Tuple[int, str, str]:
        return (
            -event.matching_topic_count(self.topics),
            event.name,
            event.promoter_name or "",
        )

    def rank(self, events: Iterable[Event]) -> List[Event]:
        return sorted(events, key=self.key)
