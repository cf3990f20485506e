from app.clients.errors import (
    RecordsApiError, RecordsClientError, SaveError, SyncError, TransportError,
)
from app.clients.record_sync import RecordSync, SaveResult
from app.clients.records_api import RecordsApi

__all__ = [
    "RecordSync", "RecordsApi", "RecordsApiError", "RecordsClientError",
    "SaveError", "SaveResult", "SyncError", "TransportError",
]
