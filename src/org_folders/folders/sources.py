"""Folder data sources — sample data in memory and JSON snapshots in Azure Blob Storage."""

from __future__ import annotations

import json
import logging
import random
import uuid
from typing import TYPE_CHECKING, Protocol

from azure.core.exceptions import ResourceNotFoundError
from azure.storage.blob import BlobServiceClient

from org_folders.folders.models import Folder

if TYPE_CHECKING:
    from org_folders.config import AppConfig

logger = logging.getLogger(__name__)

DATA_SOURCE_SAMPLE = "sample"
DATA_SOURCE_BLOB = "blob"

# Every SAMPLE_FOREIGN_ORG_EVERY-th sample folder belongs to a random organization.
SAMPLE_FOREIGN_ORG_EVERY = 3


class FolderSnapshotError(Exception):
    """Raised when a stored folder snapshot is not a JSON array of folder objects."""


class FolderFetcher(Protocol):
    """Capability to list every folder of every organization, unfiltered."""

    def fetch_all_folders(self) -> list[Folder]: ...


def _random_uuid(rng: random.Random) -> uuid.UUID:
    return uuid.UUID(int=rng.getrandbits(128), version=4)


def generate_sample_folders(
    count: int,
    default_org_id: uuid.UUID,
    rng: random.Random,
    deleted_ratio: float = 0.0,
) -> list[Folder]:
    """Generate a deterministic sample dataset.

    Folders at indexes divisible by three are assigned a fresh random
    organization; all others belong to ``default_org_id``. With ``count=1000``
    the default organization therefore owns 666 folders.

    Args:
        count: Number of folders to generate.
        default_org_id: Organization that owns two thirds of the folders.
        rng: Randomness source; the same seed always yields the same dataset.
        deleted_ratio: Probability that a folder is flagged as deleted.

    Returns:
        Generated folders in index order.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    folders: list[Folder] = []
    for i in range(count):
        org_id = _random_uuid(rng) if i % SAMPLE_FOREIGN_ORG_EVERY == 0 else default_org_id
        folders.append(
            Folder(
                id=_random_uuid(rng),
                name=f"/folders/folder-{i:04d}",
                org_id=org_id,
                deleted=rng.random() < deleted_ratio,
            )
        )
    return folders


class InMemoryFolderFetcher:
    """Serves a fixed, fully materialized list of folders."""

    def __init__(self, folders: list[Folder]) -> None:
        self._folders = list(folders)

    def fetch_all_folders(self) -> list[Folder]:
        return list(self._folders)


class BlobFolderFetcher:
    """Reads a JSON folder snapshot from Azure Blob Storage.

    The blob holds a UTF-8 JSON array of objects as produced by
    :meth:`Folder.to_dict`. Storage errors propagate unchanged;
    a missing snapshot is logged before its ``ResourceNotFoundError`` is re-raised.
    """

    def __init__(self, storage_connection_string: str, container: str, blob: str) -> None:
        """Initialise the blob fetcher.

        Args:
            storage_connection_string: Azure Storage connection string.
            container: Blob container holding the snapshot.
            blob: Blob path of the snapshot file.
        """
        self._blob_service = BlobServiceClient.from_connection_string(storage_connection_string)
        self._container = container
        self._blob = blob

    def fetch_all_folders(self) -> list[Folder]:
        """Download and parse the folder snapshot.

        Returns:
            All folders in the snapshot, in stored order.

        Raises:
            FolderSnapshotError: If the blob content is not a JSON array of
                folder objects.
        """
        container_client = self._blob_service.get_container_client(self._container)
        blob_client = container_client.get_blob_client(self._blob)
        try:
            data = blob_client.download_blob().readall()
        except ResourceNotFoundError:
            logger.error(
                "[fetch_all_folders] folder snapshot not found; container:%s;blob:%s",
                self._container,
                self._blob,
            )
            raise

        try:
            raw = json.loads(data)
        except ValueError as exc:
            raise FolderSnapshotError(f"snapshot {self._blob} is not valid JSON") from exc
        if not isinstance(raw, list):
            raise FolderSnapshotError(f"snapshot {self._blob} is not a JSON array")

        try:
            folders = [Folder.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise FolderSnapshotError(
                f"snapshot {self._blob} contains a malformed folder: {exc}"
            ) from exc

        logger.info(
            "[fetch_all_folders] loaded folder snapshot; container:%s;blob:%s;folder_count:%d",
            self._container,
            self._blob,
            len(folders),
        )
        return folders


def folder_fetcher_from_config(config: AppConfig) -> FolderFetcher:
    """Construct the configured folder data source.

    Args:
        config: Application configuration instance.

    Returns:
        An in-memory fetcher over seeded sample data, or a blob fetcher.

    Raises:
        ValueError: If the data source is unknown, or ``blob`` is selected
            without a storage connection string.
    """
    if config.data_source == DATA_SOURCE_SAMPLE:
        folders = generate_sample_folders(
            count=config.sample_size,
            default_org_id=uuid.UUID(config.default_org_id),
            rng=random.Random(config.sample_seed),
        )
        return InMemoryFolderFetcher(folders)

    if config.data_source == DATA_SOURCE_BLOB:
        if not config.storage_connection_string:
            raise ValueError("blob data source requires a storage connection string")
        return BlobFolderFetcher(
            storage_connection_string=config.storage_connection_string,
            container=config.folders_container,
            blob=config.folders_blob,
        )

    raise ValueError(f"unknown data source: {config.data_source!r}")
