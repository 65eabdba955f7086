import logging
from typing import Optional
from uuid import uuid4


def new_request_id() -> str:
    return uuid4().hex[:10]


class RequestIdFilter(logging.Filter):
    """Stamps every log record with the ID of the command currently running."""
    def __init__(self):
        super().__init__()
        self.current_request_id: Optional[str] = None

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = self.current_request_id or ""
        return True

    def set_request_id(self, request_id: Optional[str]):
        self.current_request_id = request_id


class RequestIdContextManager:
    """Sets a fresh request ID on enter and restores the previous one on exit."""
    def __init__(self, request_id_filter: RequestIdFilter):
        self.request_id_filter = request_id_filter
        self._previous: list = []

    def __enter__(self):
        self._previous.append(self.request_id_filter.current_request_id)
        self.request_id_filter.set_request_id(new_request_id())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.request_id_filter.set_request_id(self._previous.pop())

    @property
    def request_id(self) -> Optional[str]:
        return self.request_id_filter.current_request_id
