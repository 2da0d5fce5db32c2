from wardbook.store.abc import RecordStore
from wardbook.store.flatfile import FlatFileStore
from wardbook.store.replay import load_into, save_from

__all__ = ["RecordStore", "FlatFileStore", "load_into", "save_from"]
