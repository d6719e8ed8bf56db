"""Storage contracts — blobs, tables, state and secrets."""

from __future__ import annotations

import datetime as dt
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from enum import StrEnum
from typing import Any, BinaryIO, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from cloudcore.contracts.access import SignedAccessConfig


class TransferEventType(StrEnum):
    FAILED = "failed"
    TRANSFERRED = "transferred"
    SKIPPED = "skipped"


class TransferEvent(BaseModel):
    """One file movement reported during a directory copy."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: Any = None
    destination: Any = None
    start_time: dt.datetime | None = None
    end_time: dt.datetime | None = None
    exception: BaseException | None = None


class TransferResult(BaseModel):
    model_config = {"frozen": True}

    bytes_transferred: int = 0
    number_of_files_transferred: int = 0
    number_of_files_skipped: int = 0
    number_of_files_failed: int = 0


TransferCallback = Callable[[TransferEventType, TransferEvent], None]


@runtime_checkable
class BlobItem(Protocol):
    file_name: str
    file_extension: str
    file_name_without_extension: str
    path: str
    file_size: int
    content_hash: str
    root_folder: str
    tag: Any
    unique_lease_name: str | None
    last_write_time: dt.datetime
    properties: dict[str, str]
    metadata: dict[str, str]


@runtime_checkable
class BlobStorage(Protocol):
    """Hierarchical blob storage (containers, folders and files)."""

    name: str

    async def list_folders(self) -> list[str]: ...

    async def get_blob(self, blob_path: str, fetch_attributes: bool = False) -> BlobItem: ...

    async def get_blob_with_lock(self, blob_path: str, lease_name: str = "") -> BlobItem: ...

    async def exists(self, blob_path: str) -> bool: ...

    def unlock_blob(self, item: BlobItem) -> None: ...

    def list_blobs(
        self,
        root_folder: str,
        recursive: bool,
        fetch_attributes: bool = False,
        search_prefix: str | None = None,
    ) -> Iterator[BlobItem]: ...

    def list_blobs_stream(
        self,
        root_folder: str,
        recursive: bool,
        fetch_attributes: bool = False,
        search_prefix: str | None = None,
    ) -> AsyncIterator[BlobItem]: ...

    async def download_blob(self, blob: str | BlobItem) -> BinaryIO: ...

    async def download_blob_to_file(self, blob_path: str, file_path: str) -> None: ...

    async def upload_blob(
        self, blob_path: str, content: BinaryIO | str, metadata: dict[str, str] | None = None
    ) -> None: ...

    async def delete_blob(self, blob_path: str) -> None: ...

    async def add_folder(self, path: str) -> None: ...

    async def remove_folder(self, path: str) -> None: ...

    async def update_blob_metadata(self, blob: BlobItem) -> None: ...

    async def copy_directory(
        self,
        source_directory_path: str,
        destination_directory_path: str,
        transfer_event: TransferCallback | None = None,
    ) -> TransferResult: ...

    async def get_signed_blob_access_url(
        self, blob_path: str, signed_access_config: SignedAccessConfig
    ) -> str: ...

    async def get_signed_folder_access_url(
        self, folder_path: str, signed_access_config: SignedAccessConfig
    ) -> str: ...

    def close(self) -> None: ...


@runtime_checkable
class TableItem(Protocol):
    key: str


@runtime_checkable
class TableStorage(Protocol):
    """Key/value table storage."""

    name: str

    async def exists(self, table_name: str, key: str) -> bool: ...

    async def get_entity(self, table_name: str, key: str) -> Any: ...

    async def upsert_entity(self, table_name: str, item: TableItem) -> None: ...

    async def delete_entity(self, table_name: str, key: str) -> None: ...

    async def delete_entities(
        self, table_name: str, keys: Iterable[str], batch_size: int = 10
    ) -> None: ...

    async def list_table_names(self) -> list[str]: ...

    async def count_items(self, table_name: str, key: str | None = None) -> int: ...

    async def count_items_query(self, table_name: str, query: str) -> int: ...

    async def create_table(self, table_name: str) -> None: ...

    async def delete_table(self, table_name: str) -> None: ...


@runtime_checkable
class StateStorage(Protocol):
    """Durable key/value state, e.g. checkpoints between runs."""

    async def get_state(self, key: str) -> Any: ...

    async def set_state(self, key: str, state: Any) -> None: ...

    async def delete_state(self, key: str) -> None: ...

    async def is_state_stored(self, key: str) -> bool: ...


@runtime_checkable
class SecureVault(Protocol):
    async def set_secret(self, secret_name: str, secret_value: str) -> None: ...

    async def get_secret(self, secret_name: str) -> str | None: ...
