from cssvars.watch.poller import FileWatcher

__all__ = ["FileWatcher"]
