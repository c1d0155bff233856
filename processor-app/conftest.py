import time

import pytest

from text_processor.models import ProcessedTextRecord
from text_processor.store import RecordStore


class RecordingStore(RecordStore):
    """In-memory store that keeps every record it is given."""

    def __init__(self) -> None:
        self.records: list[ProcessedTextRecord] = []

    def put(self, record: ProcessedTextRecord) -> None:
        self.records.append(record)


class FailingStore(RecordStore):
    def __init__(self) -> None:
        self.attempted: list[ProcessedTextRecord] = []

    def put(self, record: ProcessedTextRecord) -> None:
        self.attempted.append(record)
        raise RuntimeError("table unavailable")


class SlowStore(RecordingStore):
    """Store whose writes block the calling thread, like a network round trip."""

    delay_seconds = 0.5

    def put(self, record: ProcessedTextRecord) -> None:
        time.sleep(self.delay_seconds)
        super().put(record)


@pytest.fixture()
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture()
def slow_store() -> SlowStore:
    return SlowStore()
