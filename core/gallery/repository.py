# Path: core/gallery/repository.py
# Purpose: Coordinate loading, permission gating, scanning, deletion, and read-only gallery queries.
# Layer: core/gallery.
# Details: Owns the index lifecycle state machine and the at-most-one-scan busy flag.

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from config.settings import AppSettings, GallerySettings
from core.indexing.scanner import ImageScanner
from core.models.domain import ImageEntry, ScanOutcome, ScanStatus, TimelineRange
from core.storage.json_store import JsonBoxStore
from .grouping import filter_albums, group_albums, images_in_last, ordered_album_ids
from .index_store import IndexStore

logger = logging.getLogger(__name__)

PermissionGate = Callable[[], bool]
Clock = Callable[[], datetime]


class GalleryState(Enum):
    """Lifecycle of the gallery index."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    PERMISSION_BLOCKED = "permission_blocked"
    SCANNING = "scanning"


class GalleryRepository:
    """High-level service bridging presentation layers with the scanner and index store.

    The permission gate is a callable returning whether storage may be read; the
    repository never prompts for permissions itself. Only one scan runs at a time:
    a scan requested while another is in flight is dropped with ScanStatus.BUSY.
    """

    def __init__(
        self,
        store: IndexStore,
        settings: Optional[GallerySettings] = None,
        permission_gate: Optional[PermissionGate] = None,
        scanner: Optional[ImageScanner] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self.settings = settings or GallerySettings()
        self.permission_gate: PermissionGate = permission_gate or (lambda: True)
        self.scanner = scanner or ImageScanner(
            self.settings.image_folder,
            extensions=self.settings.supported_extensions,
            show_progress=self.settings.show_progress,
        )
        self.clock: Clock = clock or datetime.now
        self._state = GalleryState.UNINITIALIZED
        self._state_lock = threading.Lock()
        self._scan_lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._last_scan: Optional[datetime] = None

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        permission_gate: Optional[PermissionGate] = None,
    ) -> "GalleryRepository":
        """Wire a repository backed by the JSON box configured in settings."""

        box = JsonBoxStore(settings.storage.directory, settings.storage.box_name)
        store = IndexStore(box, key=settings.storage.images_key)
        return cls(store, settings=settings.gallery, permission_gate=permission_gate)

    # Lifecycle
    @property
    def state(self) -> GalleryState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is not GalleryState.UNINITIALIZED

    @property
    def is_loading(self) -> bool:
        return self._state in (GalleryState.LOADING, GalleryState.SCANNING)

    @property
    def permission_denied(self) -> bool:
        return self._state is GalleryState.PERMISSION_BLOCKED

    @property
    def last_scan(self) -> Optional[datetime]:
        return self._last_scan

    def init(self) -> GalleryState:
        """Load the persisted index and consult the permission gate.

        Calling init more than once is a no-op. When access is granted and
        ``scan_on_init`` is set, a scan runs before returning.

        External calls:
        - core/gallery/index_store.py::IndexStore.load - restore entries persisted by earlier runs.
        """

        with self._state_lock:
            if self._state is not GalleryState.UNINITIALIZED:
                return self._state
            self._state = GalleryState.LOADING

        loaded = self.store.load()
        logger.info("Loaded %d persisted images", len(loaded))
        self._settle_permission(self._ask_gate())

        if self._state is GalleryState.READY and self.settings.scan_on_init:
            self.scan_and_sync()
        return self._state

    def request_permissions(self) -> bool:
        """Re-consult the permission gate; a grant unblocks scanning."""

        if self._state is GalleryState.UNINITIALIZED:
            raise RuntimeError("Gallery repository is not initialized")
        granted = self._ask_gate()
        if self._state is GalleryState.PERMISSION_BLOCKED:
            if not granted:
                logger.info("Storage access still denied")
                return False
            with self._state_lock:
                self._state = GalleryState.LOADING
            self._settle_permission(granted)
        return granted

    def _settle_permission(self, granted: bool) -> None:
        with self._state_lock:
            self._state = GalleryState.READY if granted else GalleryState.PERMISSION_BLOCKED
        if not granted:
            logger.info("Storage access denied; scanning disabled")

    def _ask_gate(self) -> bool:
        return bool(self.permission_gate())

    # Scanning
    def scan_and_sync(self) -> ScanOutcome:
        """Scan the gallery folder and replace the index with what was found.

        Returns BLOCKED unless the repository is ready, BUSY when another scan
        holds the busy flag, and leaves the index untouched on NOT_FOUND or FAILED.
        """

        if self._state is not GalleryState.READY and self._state is not GalleryState.SCANNING:
            return ScanOutcome(status=ScanStatus.BLOCKED)
        if not self._scan_lock.acquire(blocking=False):
            logger.debug("Scan already running; request dropped")
            return ScanOutcome(status=ScanStatus.BUSY)
        return self._scan_holding_lock()

    def start_scan(self) -> Optional[Future]:
        """Run scan_and_sync on a background worker.

        Returns None when the request is dropped because a scan is already running.
        """

        if self._state is not GalleryState.READY:
            return None
        if not self._scan_lock.acquire(blocking=False):
            logger.debug("Scan already running; background request dropped")
            return None
        try:
            return self._get_executor().submit(self._scan_holding_lock)
        except RuntimeError:
            self._scan_lock.release()
            raise

    def _scan_holding_lock(self) -> ScanOutcome:
        """Run one scan; the caller has already acquired the busy flag."""

        try:
            with self._state_lock:
                if self._state is not GalleryState.READY:
                    return ScanOutcome(status=ScanStatus.BLOCKED)
                self._state = GalleryState.SCANNING
            try:
                outcome = self.scanner.scan()
                if outcome.status is ScanStatus.COMPLETED:
                    self.store.replace_all(outcome.entries)
                    self._last_scan = outcome.scanned_at or self.clock()
                return outcome
            except OSError:
                logger.warning("Scan error", exc_info=True)
                return ScanOutcome(status=ScanStatus.FAILED)
            finally:
                with self._state_lock:
                    self._state = GalleryState.READY
        finally:
            self._scan_lock.release()

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="gallery-scan")
        return self._executor

    def close(self) -> None:
        """Wait for any background scan and release the worker thread."""

        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # Deletion
    def delete_image(self, path: str) -> bool:
        """Delete the file behind an entry and drop it from the index.

        The index entry is removed even when the file cannot be deleted, so the
        file may linger on disk in that case. Returns True when the file was deleted.
        """

        if self._state is GalleryState.UNINITIALIZED:
            raise RuntimeError("Gallery repository is not initialized")

        deleted = False
        if self.settings.delete_files:
            target = Path(path)
            try:
                if target.exists():
                    target.unlink()
                    deleted = True
            except OSError as exc:
                logger.warning("Delete file error for %s: %s", path, exc)
        try:
            self.store.remove(path)
        except OSError as exc:
            logger.warning("Could not persist removal of %s: %s", path, exc)
        return deleted

    # Queries
    @property
    def images(self) -> Tuple[ImageEntry, ...]:
        return self.store.images

    def albums(self) -> Dict[str, List[ImageEntry]]:
        return group_albums(self.store.images)

    def ordered_albums(self) -> List[Tuple[str, List[ImageEntry]]]:
        """Return (contact id, entries) pairs, most recently active album first."""

        albums = self.albums()
        return [(album_id, albums[album_id]) for album_id in ordered_album_ids(albums)]

    def images_in_last(self, window: timedelta) -> List[ImageEntry]:
        return images_in_last(self.store.images, window, now=self.clock())

    def timeline(self, timeline_range: TimelineRange = TimelineRange.TODAY) -> List[ImageEntry]:
        return self.images_in_last(timeline_range.window)

    def search_albums(self, query: str) -> List[Tuple[str, List[ImageEntry]]]:
        """Return ordered albums whose display name matches query."""

        ordered = self.ordered_albums()
        keep = set(filter_albums((album_id for album_id, _ in ordered), query))
        return [(album_id, entries) for album_id, entries in ordered if album_id in keep]
