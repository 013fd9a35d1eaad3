"""Pytest configuration — adds src/ to sys.path and provides shared folder fixtures."""

import os
import sys
import uuid

import pytest

# Add src/ to Python path so tests can import from org_folders
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from org_folders.folders.models import Folder  # noqa: E402
from org_folders.folders.service import FolderService  # noqa: E402
from org_folders.folders.sources import InMemoryFolderFetcher  # noqa: E402

ORG_X = uuid.UUID("11111111-1111-4111-8111-111111111111")
ORG_Y = uuid.UUID("22222222-2222-4222-8222-222222222222")
ORG_OTHER = uuid.UUID("33333333-3333-4333-8333-333333333333")


def make_folders(org_id: uuid.UUID, count: int, prefix: str = "f") -> list[Folder]:
    """Build ``count`` folders for one organization with predictable ids and names."""
    return [
        Folder(
            id=uuid.uuid5(org_id, f"{prefix}-{i}"),
            name=f"/{prefix}/{i:02d}",
            org_id=org_id,
        )
        for i in range(count)
    ]


@pytest.fixture
def mixed_folders() -> list[Folder]:
    """15 folders for ORG_X interleaved with 7 folders for ORG_OTHER; none for ORG_Y."""
    mine = make_folders(ORG_X, 15, prefix="x")
    theirs = make_folders(ORG_OTHER, 7, prefix="o")
    folders: list[Folder] = []
    for i, folder in enumerate(mine):
        folders.append(folder)
        if i < len(theirs):
            folders.append(theirs[i])
    return folders


@pytest.fixture
def service(mixed_folders: list[Folder]) -> FolderService:
    return FolderService(fetcher=InMemoryFolderFetcher(mixed_folders))
