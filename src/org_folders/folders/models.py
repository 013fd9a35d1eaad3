"""Data models for folder records and fetch requests/responses."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

# Folder JSON field names
FIELD_ID = "id"
FIELD_NAME = "name"
FIELD_ORG_ID = "org_id"
FIELD_DELETED = "deleted"

# Response JSON field names
FIELD_FOLDERS = "folders"
FIELD_TOKEN = "token"


@dataclass(frozen=True)
class Folder:
    """A single folder record owned by an organization."""

    id: uuid.UUID
    name: str
    org_id: uuid.UUID
    deleted: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with string UUIDs."""
        return {
            FIELD_ID: str(self.id),
            FIELD_NAME: self.name,
            FIELD_ORG_ID: str(self.org_id),
            FIELD_DELETED: self.deleted,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Folder:
        """Build a Folder from a dict produced by :meth:`to_dict`.

        Raises:
            KeyError: If a required field is missing.
            TypeError: If a field has the wrong JSON type.
            ValueError: If an id field is not a valid UUID.
        """
        for key in (FIELD_ID, FIELD_NAME, FIELD_ORG_ID):
            if not isinstance(raw[key], str):
                raise TypeError(f"folder field {key!r} must be a string, got {raw[key]!r}")
        deleted = raw.get(FIELD_DELETED, False)
        if not isinstance(deleted, bool):
            raise TypeError(f"folder field {FIELD_DELETED!r} must be a boolean, got {deleted!r}")

        return cls(
            id=uuid.UUID(raw[FIELD_ID]),
            name=raw[FIELD_NAME],
            org_id=uuid.UUID(raw[FIELD_ORG_ID]),
            deleted=deleted,
        )


@dataclass(frozen=True)
class FetchFolderRequest:
    """Selects the folders of one organization.

    Attributes:
        org_id: Organization to filter by. The nil UUID matches nothing.
        include_deleted: When False, folders flagged as deleted are dropped.
    """

    org_id: uuid.UUID
    include_deleted: bool = True


@dataclass
class FetchFolderResponse:
    """One page (or the full set) of folders plus the continuation token.

    An empty ``token`` means there are no further pages.
    """

    folders: list[Folder] = field(default_factory=list)
    token: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            FIELD_FOLDERS: [f.to_dict() for f in self.folders],
            FIELD_TOKEN: self.token,
        }
