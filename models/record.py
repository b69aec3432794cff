"""Queue record model - one message of an SQS batch."""

import json
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class QueueRecord:
    """A single queue message as delivered in the `Records` array."""

    body: str
    message_id: str = "unknown"
    attributes: dict = field(default_factory=dict)

    @classmethod
    def from_event_record(cls, raw: dict) -> "QueueRecord":
        return cls(
            body=raw["body"],
            message_id=raw.get("messageId", "unknown"),
            attributes=raw.get("attributes") or {},
        )

    def payload(self) -> Any:
        """Decode the JSON body. Raises json.JSONDecodeError when malformed."""
        return json.loads(self.body)


def records_from_event(event: dict) -> Iterator[QueueRecord]:
    """Yield the batch records in delivery order, one at a time."""
    for raw in event["Records"]:
        yield QueueRecord.from_event_record(raw)
