from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from screencopy.logging.logger import Log
from screencopy.screens.models import ScreenRecord, ScreenStatus, ScreenUpdate


class ChangeKind(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"
    REPLACED = "replaced"


@dataclass(frozen=True)
class StoreChange:
    """Notification sent to store observers after every mutation."""

    kind: ChangeKind
    record_ids: tuple[str, ...] = ()
    update: ScreenUpdate | None = None


StoreListener = Callable[[StoreChange], None]


@dataclass
class ScreenStore:
    """In-memory ordered collection of screen records for one session.

    The store owns record identity: ids are unique and never reused, even
    after the record holding one is removed.
    """

    _records: list[ScreenRecord] = field(default_factory=list)
    _issued_ids: set[str] = field(default_factory=set)
    _listeners: list[StoreListener] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ScreenRecord]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    @property
    def records(self) -> list[ScreenRecord]:
        """Snapshot of the records in insertion order."""
        return list(self._records)

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def get(self, record_id: str) -> ScreenRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def completed(self) -> list[ScreenRecord]:
        return [r for r in self._records if r.status is ScreenStatus.COMPLETED]

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register an observer. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, records: Iterable[ScreenRecord]) -> None:
        """Append records after the existing ones, preserving their order.

        Raises:
            ValueError: if any id is already in use or was used before.
        """
        new_records = list(records)
        new_ids = [r.id for r in new_records]
        self._check_ids(new_ids, allowed=set())
        self._records.extend(new_records)
        self._issued_ids.update(new_ids)
        Log.debug(f"Added {len(new_records)} screens, {len(self._records)} total")
        self._notify(StoreChange(kind=ChangeKind.ADDED, record_ids=tuple(new_ids)))

    def remove(self, record_id: str) -> bool:
        """Remove a record by id and release its preview.

        Removing an id that is not present is a no-op. Returns whether a
        record was removed.
        """
        record = self.get(record_id)
        if record is None:
            Log.debug(f"Remove ignored, screen {record_id} not in store")
            return False
        self._records = [r for r in self._records if r.id != record_id]
        if record.preview is not None:
            record.preview.release()
        Log.info(f"Removed screen {record_id}", file_name=record.file_name)
        self._notify(StoreChange(kind=ChangeKind.REMOVED, record_ids=(record_id,)))
        return True

    def replace(self, records: Iterable[ScreenRecord]) -> None:
        """Swap the whole collection, releasing previews of dropped records.

        Records already in the store may be passed again; any other id must
        be new to the session.

        Raises:
            ValueError: if ids repeat or an id from a removed record comes back.
        """
        new_records = list(records)
        kept_ids = {r.id for r in new_records}
        self._check_ids([r.id for r in new_records], allowed=set(self.ids()))
        for record in self._records:
            if record.id not in kept_ids and record.preview is not None:
                record.preview.release()
        self._records = new_records
        self._issued_ids.update(kept_ids)
        self._notify(
            StoreChange(kind=ChangeKind.REPLACED, record_ids=tuple(r.id for r in new_records))
        )

    def clear(self) -> None:
        """Release every preview handle, then empty the store."""
        self.replace([])

    def apply(self, update: ScreenUpdate) -> bool:
        """Apply one state transition atomically.

        Updates addressed to records no longer in the store, or to records
        that already completed, are ignored. Returns whether it was applied.
        """
        record = self.get(update.record_id)
        if record is None:
            Log.warning(f"Dropping update for removed screen {update.record_id}")
            return False
        if record.status is ScreenStatus.COMPLETED:
            Log.warning(f"Screen {update.record_id} already completed, update ignored")
            return False
        record.status = update.status
        record.error_stage = update.error_stage
        record.structured_copy = update.structured_copy
        self._notify(
            StoreChange(kind=ChangeKind.UPDATED, record_ids=(update.record_id,), update=update)
        )
        return True

    def _check_ids(self, record_ids: list[str], allowed: set[str]) -> None:
        if len(set(record_ids)) != len(record_ids):
            raise ValueError("Duplicate record ids in the same batch")
        reused = [
            record_id
            for record_id in record_ids
            if record_id in self._issued_ids and record_id not in allowed
        ]
        if reused:
            raise ValueError(f"Record ids already issued in this session: {reused}")

    def _notify(self, change: StoreChange) -> None:
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as exc:
                Log.exception(f"Store listener failed on {change.kind.value}: {exc}")
