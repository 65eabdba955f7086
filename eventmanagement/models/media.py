from dataclasses import dataclass, field
from datetime import datetime

from eventmanagement.models.account import Account, NullAccount


@dataclass
class Media:
    """A file attached to an event."""

    id: int = 0
    name: str = ""
    description: str = ""
    path: str = ""
    size: int = 0
    """Size of the file in bytes."""

    extension: str = ""
    created_by: Account = field(default_factory=NullAccount)
    created_at: datetime = field(default_factory=datetime.now)
