"""
Folder Watcher.

This module watches the organized folder for new files and re-runs the
organizer whenever one shows up.

WHAT IT DOES:
    1. Subscribes to filesystem events for the folder (not its subfolders)
    2. Queues every event from the observer thread
    3. Drains the queue on the calling thread, one event at a time
    4. Runs a full organize pass on file creation, data change, or a file
       renamed into the folder
    5. Logs watch errors and failed passes without stopping the loop
"""

import enum
import logging
import os
import queue
from pathlib import Path
from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from . import config
from .organizer import organize_files

logger = logging.getLogger(__name__)

# (st_size, st_mtime_ns)
Signature = Tuple[int, int]

# Tells the loop to return
_STOP = object()


class WatcherState(enum.Enum):
    IDLE = "idle"
    WATCHING = "watching"
    REORGANIZING = "reorganizing"


class QueuedEvent(NamedTuple):
    event: FileSystemEvent
    signature: Optional[Signature] = None


def _abspath(path: Union[str, bytes, Path]) -> str:
    return os.path.abspath(os.fsdecode(path))


def file_signature(path: Union[str, Path]) -> Signature:
    """Get the (size, mtime) pair used to tell data changes from metadata changes."""
    stat = os.stat(path)
    return (stat.st_size, stat.st_mtime_ns)


class EventForwarder(FileSystemEventHandler):
    """
    File system event handler that only enqueues.

    Runs in the observer thread. Modified events carry the file signature
    taken at delivery time; a failed stat is queued as the error itself.
    """

    def __init__(self, events: "queue.Queue"):
        super().__init__()
        self.events = events

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type != EVENT_TYPE_MODIFIED or event.is_directory:
            self.events.put(QueuedEvent(event))
            return

        try:
            signature = file_signature(os.fsdecode(event.src_path))
        except FileNotFoundError:
            signature = None
        except OSError as e:
            self.events.put(e)
            return

        self.events.put(QueuedEvent(event, signature))


def is_qualifying_event(
    item: QueuedEvent,
    folder: Union[str, Path],
    signatures: Optional[Dict[str, Signature]] = None,
) -> bool:
    """
    Check whether a queued event should trigger an organize pass.

    Args:
        item: Event and its delivery-time signature
        folder: Watched folder
        signatures: Signatures of files left in the folder after the last pass

    Returns:
        True for file creation, data modification, or a rename into the folder
    """
    event = item.event
    if event.is_directory:
        return False

    if event.event_type == EVENT_TYPE_CREATED:
        return True

    if event.event_type == EVENT_TYPE_MODIFIED:
        if item.signature is None:
            # File is gone
            return False
        known = (signatures or {}).get(_abspath(event.src_path))
        return known != item.signature

    if event.event_type == EVENT_TYPE_MOVED:
        dest_path = getattr(event, "dest_path", "")
        if not dest_path:
            return False
        return os.path.dirname(_abspath(dest_path)) == _abspath(folder)

    return False


class FolderWatcher:
    """
    Watches one folder and reorganizes it on qualifying events.

    Events are delivered through an unbounded queue and handled
    synchronously, so organize passes never overlap.
    """

    def __init__(
        self,
        folder: Union[str, Path],
        organize: Callable[[Path], object] = organize_files,
    ):
        self.folder = Path(folder)
        self.organize = organize
        self.events: "queue.Queue" = queue.Queue()
        self.state = WatcherState.IDLE
        self.signatures: Dict[str, Signature] = {}
        self.observer: Optional[Observer] = None

    def start(self) -> None:
        """Subscribe to events. OSError here means the watch cannot start."""
        observer = Observer()
        observer.schedule(EventForwarder(self.events), str(self.folder), recursive=False)
        observer.start()
        self.observer = observer

        self._record_signatures()
        logger.info(f"Watching for new files in {self.folder}")
        self.state = WatcherState.WATCHING

    def stop(self) -> None:
        """Ask the loop to return after the events already queued."""
        self.events.put(_STOP)

    def run(self) -> None:
        """Watch until interrupted (Ctrl+C) or stopped."""
        self.start()
        try:
            self.loop()
        except KeyboardInterrupt:
            logger.info("Stopping watcher...")
        finally:
            self._shutdown_observer()
        logger.info("Watcher stopped")

    def loop(self) -> None:
        while True:
            try:
                item = self.events.get(timeout=config.OBSERVER_CHECK_SECONDS)
            except queue.Empty:
                if not self._observer_alive():
                    logger.error(f"Stopped receiving events for {self.folder}; no longer watching")
                    return
                continue
            if item is _STOP:
                return
            self.handle(item)

    def handle(self, item: Union[QueuedEvent, Exception]) -> None:
        """Handle one queued item: log errors, reorganize on qualifying events."""
        if isinstance(item, Exception):
            logger.error(f"Watch error: {item}")
            return

        if not is_qualifying_event(item, self.folder, self.signatures):
            return

        logger.debug(f"{item.event.event_type}: {os.fsdecode(item.event.src_path)}")
        self.reorganize()

    def reorganize(self) -> None:
        """Run a full pass; a failed pass is logged and watching goes on."""
        self.state = WatcherState.REORGANIZING
        logger.info("New file detected. Reorganizing...")
        try:
            self.organize(self.folder)
        except OSError as e:
            logger.error(f"Error during reorganization: {e}")
        finally:
            self._record_signatures()
            self.state = WatcherState.WATCHING

    def _record_signatures(self) -> None:
        """Remember files still sitting in the folder (skipped on conflict)."""
        signatures = {}
        try:
            for path in self.folder.iterdir():
                if path.is_file() and not path.is_symlink():
                    signatures[_abspath(path)] = file_signature(path)
        except OSError as e:
            logger.warning(f"Could not record file signatures: {e}")
        self.signatures = signatures

    def _observer_alive(self) -> bool:
        """False once the observer or one of its emitters has died (e.g. folder removed)."""
        if self.observer is None:
            return True
        if not self.observer.is_alive():
            return False
        return all(emitter.is_alive() for emitter in self.observer.emitters)

    def _shutdown_observer(self) -> None:
        if self.observer is None:
            return
        self.observer.stop()
        self.observer.join()
        self.observer = None


def run(folder: Union[str, Path]) -> None:
    """Run the folder watcher until interrupted."""
    FolderWatcher(folder).run()
