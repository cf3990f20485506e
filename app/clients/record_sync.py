"""
Client-side working copy of the record table.

`RecordSync` keeps two snapshots of the records returned by the API:

- `baseline`: the last fetched or saved state,
- `records`: the working copy that edits are applied to.

Editing an amount re-derives `remaining` locally as a preview; the server
recomputes it authoritatively on every write. `save()` diffs the working copy
against the baseline and sends one update per changed record, concurrently.
Nothing is rolled back when an update fails: the baseline is kept, so a retry
resends the same diff and relies on updates being idempotent.
"""
import copy
import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from app.clients.errors import RecordsClientError, SaveError, SyncError
from app.clients.records_api import RecordsApi
from app.core.config import settings
from app.services.balance import calculate_remaining
from app.services.fields import AMOUNT_FIELDS, TEXT_FIELDS
from app.services.spreadsheet import SheetError, build_workbook, read_sheet_rows

logger = logging.getLogger(__name__)

READ_ONLY_KEYS = ("id", "remaining", "createdAt", "updatedAt", "columnColors")
EDITABLE_KEYS = AMOUNT_FIELDS + TEXT_FIELDS + ("rowColor",)


@dataclass
class SaveResult:
    saved: int

    @property
    def nothing_to_save(self) -> bool:
        return self.saved == 0


class RecordSync:
    def __init__(self, api: RecordsApi, max_workers: int | None = None):
        self.api = api
        self.max_workers = max_workers or settings.SYNC_MAX_WORKERS
        self.records: list[dict[str, Any]] = []
        self.baseline: list[dict[str, Any]] = []

    # ------------------------------------------------------------------
    # Snapshot handling
    # ------------------------------------------------------------------
    def fetch(self) -> list[dict[str, Any]]:
        """Reload every record; unsaved edits in the working copy are dropped."""
        data = [calculate_remaining(record) for record in self.api.list_records()]
        self.records = data
        self.baseline = copy.deepcopy(data)
        return self.records

    def get(self, record_id: Any) -> dict[str, Any]:
        for record in self.records:
            if record["id"] == str(record_id):
                return record
        raise SyncError(f"Unknown record {record_id}")

    def edit(self, record_id: Any, key: str, value: Any) -> dict[str, Any]:
        if key in READ_ONLY_KEYS or key not in EDITABLE_KEYS:
            raise SyncError(f"'{key}' cannot be edited")

        for index, record in enumerate(self.records):
            if record["id"] != str(record_id):
                continue
            updated = {**record, key: value}
            if key in AMOUNT_FIELDS:
                updated = calculate_remaining(updated)
            self.records[index] = updated
            return updated
        raise SyncError(f"Unknown record {record_id}")

    def changed_records(self) -> list[dict[str, Any]]:
        """Working-copy records that differ from their baseline counterpart."""
        baseline_by_id = {record["id"]: record for record in self.baseline}
        return [
            record
            for record in self.records
            if record["id"] in baseline_by_id and record != baseline_by_id[record["id"]]
        ]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def _dispatch(self, call: Callable[[Any], Any], items: list[Any]) -> list[RecordsClientError]:
        """Run `call` for every item concurrently and collect client failures."""
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(items))) as pool:
            futures = [pool.submit(call, item) for item in items]

        failures: list[RecordsClientError] = []
        for future in futures:
            exc = future.exception()
            if exc is None:
                continue
            if not isinstance(exc, RecordsClientError):
                raise exc
            failures.append(exc)
        return failures

    def save(self) -> SaveResult:
        changed = self.changed_records()
        if not changed:
            logger.info("Nothing to save")
            return SaveResult(saved=0)

        failures = self._dispatch(
            lambda record: self.api.update_record(record["id"], record), changed
        )
        if failures:
            logger.warning("Bulk save failed: %d of %d updates rejected", len(failures), len(changed))
            raise SaveError("Failed to save changes") from failures[0]

        self.baseline = copy.deepcopy(self.records)
        logger.info("Saved %d records", len(changed))
        return SaveResult(saved=len(changed))

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        record = calculate_remaining(self.api.create_record(data))
        self.records.append(record)
        self.baseline.append(copy.deepcopy(record))
        return record

    def delete(self, ids: Iterable[Any]) -> int:
        ids = [str(record_id) for record_id in ids]
        if not ids:
            raise SyncError("No records selected")

        failures = self._dispatch(self.api.delete_record, ids)
        if failures:
            raise SyncError("Failed to delete records") from failures[0]

        logger.info("Deleted %d records", len(ids))
        self.fetch()
        return len(ids)

    def set_column_color(self, field: str, color: str) -> None:
        if not color:
            return
        self.api.update_column_color(field, color)
        self.fetch()

    def set_row_colors(self, ids: Iterable[Any], color: str) -> int:
        ids = [str(record_id) for record_id in ids]
        if not ids:
            raise SyncError("No records selected")
        if not color:
            return 0
        updated = self.api.update_row_colors(ids, color)
        self.fetch()
        return updated

    def import_excel(self, filename: str, content: bytes) -> int:
        try:
            rows = read_sheet_rows(content)
        except SheetError as exc:
            raise SyncError(str(exc)) from exc
        if not rows:
            raise SyncError("The file is empty")

        imported = self.api.upload_excel(filename, content)
        self.fetch()
        return imported

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self, records: Iterable[dict[str, Any]] | None = None) -> bytes:
        return build_workbook(self.records if records is None else records)

    def export_to(self, path: str | Path, records: Iterable[dict[str, Any]] | None = None) -> Path:
        path = Path(path)
        path.write_bytes(self.export(records))
        return path
