from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Calendar:
    """Calendar owned by an event."""

    id: int = 0
    name: str = ""
    description: str = ""
    created_at: datetime = field(default_factory=datetime.now)
