#region Imports
import os
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.observers import Observer
from watchdog.events import FileSystemEvent, FileSystemEventHandler
#endregion


#region Classes

class SessionsFileHandler(FileSystemEventHandler):
    """
    File system event handler for the sessions file.

    Triggers a callback when the watched file is created, modified or
    replaced (editors and atomic writers often move a temp file into place).
    """

    def __init__(self, target: Path, callback: Callable[[], None], debounce_seconds: float = 1.0):
        """
        Initialize the sessions file handler.

        Args:
            target: The sessions file to react to
            callback: Function to call when the file changes
            debounce_seconds: Minimum seconds between callback invocations (prevents rapid-fire updates)
        """
        super().__init__()
        self.target = os.path.abspath(target)
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.last_triggered = 0.0

    def _matches(self, path: object) -> bool:
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return os.path.abspath(str(path)) == self.target

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(event.src_path):
            self._trigger_callback()

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(event.src_path):
            self._trigger_callback()

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(getattr(event, "dest_path", "")):
            self._trigger_callback()

    def _trigger_callback(self) -> None:
        """
        Trigger the callback with debouncing.

        Prevents rapid-fire callbacks when the writer flushes several times.
        """
        current_time = time.time()

        if current_time - self.last_triggered >= self.debounce_seconds:
            self.last_triggered = current_time
            self.callback()


class FileWatcher:
    """
    Watches a single file using watchdog, without polling.

    The parent directory is observed because watchdog works on directories.
    """

    def __init__(self, watch_file: Path, callback: Callable[[], None], debounce_seconds: float = 1.0):
        """
        Initialize the file watcher.

        Args:
            watch_file: File to watch
            callback: Function to call when the file changes
            debounce_seconds: Minimum seconds between callback invocations
        """
        self.watch_file = watch_file
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.observer: Optional[Observer] = None

    def start(self) -> None:
        """
        Start watching for file changes.

        Raises:
            FileNotFoundError: If the file's directory doesn't exist
        """
        watch_dir = self.watch_file.parent
        if not watch_dir.exists():
            raise FileNotFoundError(f"Watch path does not exist: {watch_dir}")

        event_handler = SessionsFileHandler(self.watch_file, self.callback, self.debounce_seconds)
        self.observer = Observer()
        self.observer.schedule(event_handler, str(watch_dir), recursive=False)
        self.observer.start()

    def stop(self) -> None:
        """Stop watching for file changes."""
        if self.observer:
            self.observer.stop()
            self.observer.join()

    def is_alive(self) -> bool:
        """
        Check if the watcher is running.

        Returns:
            True if watcher is active, False otherwise
        """
        return self.observer is not None and self.observer.is_alive()


#endregion
