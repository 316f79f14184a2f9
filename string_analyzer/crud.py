import logging
import threading
from datetime import timezone
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from string_analyzer.errors import ConflictError, NotFoundError, ValidationError
from string_analyzer.filters import apply_filters
from string_analyzer.models import StringRecordRow
from string_analyzer.schemas import FilterSet, StringProperties, StringRecord
from string_analyzer.utils import build_record, compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    """Key-value storage for string records, keyed by content hash"""

    def insert(self, record: StringRecord) -> StringRecord:
        """Store a new record; raises ConflictError if its id already exists"""
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[StringRecord]:
        raise NotImplementedError

    def list_all(self) -> List[StringRecord]:
        """All records, newest first"""
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError


class SQLAlchemyStringStore(StringStore):
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _to_record(row: StringRecordRow) -> StringRecord:
        created_at = row.created_at
        # SQLite drops the tzinfo on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return StringRecord(
            id=row.id,
            value=row.value,
            properties=StringProperties(**row.properties),
            created_at=created_at,
        )

    def insert(self, record: StringRecord) -> StringRecord:
        if self.db.get(StringRecordRow, record.id) is not None:
            raise ConflictError()

        row = StringRecordRow(
            id=record.id,
            value=record.value,
            properties=record.properties.model_dump(),
            created_at=record.created_at,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent insert of the same value
            self.db.rollback()
            raise ConflictError()
        self.db.refresh(row)
        return self._to_record(row)

    def get(self, record_id: str) -> Optional[StringRecord]:
        row = self.db.get(StringRecordRow, record_id)
        return self._to_record(row) if row else None

    def list_all(self) -> List[StringRecord]:
        rows = (
            self.db.query(StringRecordRow)
            .order_by(StringRecordRow.created_at.desc())
            .all()
        )
        return [self._to_record(row) for row in rows]

    def delete(self, record_id: str) -> bool:
        row = self.db.get(StringRecordRow, record_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True


class InMemoryStringStore(StringStore):
    """Dict-backed store; a single lock serializes all access"""

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def insert(self, record: StringRecord) -> StringRecord:
        with self._lock:
            if record.id in self._records:
                raise ConflictError()
            self._records[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[StringRecord]:
        with self._lock:
            return self._records.get(record_id)

    def list_all(self) -> List[StringRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


# ------------------------------------------------------------------------------
# OPERATIONS ON RAW VALUES
# ------------------------------------------------------------------------------

def create_string(store: StringStore, value: str) -> StringRecord:
    """Analyze and store a string"""
    record = build_record(value)
    try:
        created = store.insert(record)
    except ConflictError:
        logger.warning(f"Duplicate string rejected: {record.id}")
        raise
    logger.info(f"Stored string {created.id}")
    return created


def get_string(store: StringStore, value: str) -> StringRecord:
    """Get a stored string by its raw value"""
    if not value:
        raise ValidationError("Missing string value")
    record = store.get(compute_sha256(value))
    if record is None:
        raise NotFoundError()
    return record


def list_strings(store: StringStore, filters: Optional[FilterSet] = None) -> List[StringRecord]:
    """Get all strings matching the filters"""
    return apply_filters(store.list_all(), filters or FilterSet())


def delete_string(store: StringStore, value: str) -> None:
    """Delete a stored string by its raw value"""
    if not value:
        raise ValidationError("Missing string value")
    record_id = compute_sha256(value)
    if not store.delete(record_id):
        raise NotFoundError()
    logger.info(f"Deleted string {record_id}")
