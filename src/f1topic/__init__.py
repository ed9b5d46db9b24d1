"""f1topic — Formula 1 season summaries for terminals and Slack channel topics."""

from f1topic.client import F1Client
from f1topic.exceptions import (
    F1ConnectionError,
    F1DecodeError,
    F1NoDataError,
    F1OverflowError,
    F1TimeoutError,
    F1TopicError,
    F1TransportError,
)
from f1topic.topic import (
    SeasonSnapshot,
    compact_topic,
    detailed_topic,
    fetch_snapshot,
    is_error_topic,
    slack_topic,
    topic,
)

__all__ = [
    "F1Client",
    "F1ConnectionError",
    "F1DecodeError",
    "F1NoDataError",
    "F1OverflowError",
    "F1TimeoutError",
    "F1TopicError",
    "F1TransportError",
    "SeasonSnapshot",
    "compact_topic",
    "detailed_topic",
    "fetch_snapshot",
    "is_error_topic",
    "slack_topic",
    "topic",
]

__version__ = "0.1.0"
