from abc import ABC, abstractmethod
from typing import Any

import boto3

from text_processor.models import ProcessedTextRecord
from text_processor.settings import Settings


class RecordStore(ABC):
    """Write-only sink for processed text records."""

    @abstractmethod
    def put(self, record: ProcessedTextRecord) -> None:
        """Persist a record keyed by its ``id``."""


class DynamoDBRecordStore(RecordStore):
    """Stores records in a DynamoDB table with ``id`` as the partition key."""

    def __init__(self, table: Any) -> None:
        self._table = table

    @property
    def table_name(self) -> str:
        return self._table.name

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoDBRecordStore":
        """Build a store backed by the table named in settings."""
        resource = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        return cls(resource.Table(settings.table_name))

    def put(self, record: ProcessedTextRecord) -> None:
        """Write the record. Errors from boto3 propagate unchanged."""
        self._table.put_item(Item=record.to_item())
