from infra.adapters.storage.local_storage_adapter import LocalStorageAdapter

__all__ = ["LocalStorageAdapter"]
