"""Folder retrieval — organization filtering and offset-token pagination.

Pages are slices of the organization's folders, recomputed from the data
source on every call. The continuation token encodes the offset of the next
page, so all paging state lives with the caller. Offsets are positions, not
record identities: if the underlying data changes between calls, a walk can
skip or repeat folders.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from org_folders.folders.models import FetchFolderRequest, FetchFolderResponse, Folder
from org_folders.folders.sources import FolderFetcher, folder_fetcher_from_config
from org_folders.folders.token import decode_token, encode_token

if TYPE_CHECKING:
    from org_folders.config import AppConfig

logger = logging.getLogger(__name__)


class InvalidPageSizeError(ValueError):
    """Raised when a page size is not a positive integer."""

    def __init__(self, page_size: object) -> None:
        super().__init__(f"page size must be a positive integer, got {page_size!r}")
        self.page_size = page_size


def filter_by_org(
    folders: Iterable[Folder],
    org_id: uuid.UUID,
    include_deleted: bool = True,
) -> list[Folder]:
    """Return the folders owned by ``org_id``, preserving source order.

    Args:
        folders: Unfiltered folders from a data source.
        org_id: Organization to match exactly.
        include_deleted: When False, drop folders flagged as deleted.

    Returns:
        Matching folders; empty when nothing matches.
    """
    return [
        folder
        for folder in folders
        if folder.org_id == org_id and (include_deleted or not folder.deleted)
    ]


class FolderService:
    """Serves an organization's folders in full or page by page."""

    def __init__(self, fetcher: FolderFetcher) -> None:
        """Initialise the service.

        Args:
            fetcher: Data source listing all folders of all organizations.
        """
        self._fetcher = fetcher

    def fetch_all_folders_by_org_id(
        self, org_id: uuid.UUID, include_deleted: bool = True
    ) -> list[Folder]:
        """Fetch a fresh snapshot and filter it to one organization."""
        return filter_by_org(self._fetcher.fetch_all_folders(), org_id, include_deleted)

    def get_all_folders(self, req: FetchFolderRequest) -> FetchFolderResponse:
        """Return every folder of the requested organization.

        The response token is always empty.
        """
        folders = self.fetch_all_folders_by_org_id(req.org_id, req.include_deleted)
        logger.info(
            "[get_all_folders] fetched folders; org_id:%s;folder_count:%d",
            req.org_id,
            len(folders),
        )
        return FetchFolderResponse(folders=folders)

    def fetch_folders_with_pagination(
        self,
        req: FetchFolderRequest,
        page_size: int,
        token: str | None = "",
    ) -> FetchFolderResponse:
        """Return one page of the requested organization's folders.

        Args:
            req: Organization selection.
            page_size: Maximum number of folders in the page; must be positive.
            token: Continuation token from the previous page, or empty/None
                for the first page.

        Returns:
            The page and the token of the next page. The token is empty when
            this page reaches the end. An offset at or past the end yields an
            empty page with an empty token.

        Raises:
            InvalidPageSizeError: If page_size is not a positive integer.
            InvalidTokenError: If the token cannot be decoded.
        """
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise InvalidPageSizeError(page_size)

        folders = self.fetch_all_folders_by_org_id(req.org_id, req.include_deleted)

        start = decode_token(token) if token else 0
        end = min(start + page_size, len(folders))
        page = folders[start:end]

        next_token = encode_token(end) if end < len(folders) else ""

        logger.info(
            "[fetch_folders_with_pagination] served page; org_id:%s;start:%d;page_count:%d;"
            "total:%d;has_more:%s",
            req.org_id,
            start,
            len(page),
            len(folders),
            bool(next_token),
        )
        return FetchFolderResponse(folders=page, token=next_token)

    def iter_folder_pages(
        self, req: FetchFolderRequest, page_size: int
    ) -> Iterator[FetchFolderResponse]:
        """Walk all pages of an organization from the first to the last.

        Yields each response, including a final page that may be empty when
        the organization has no folders. Errors propagate to the consumer.
        """
        token = ""
        while True:
            response = self.fetch_folders_with_pagination(req, page_size, token)
            yield response
            if not response.token:
                return
            token = response.token


def render_response(response: FetchFolderResponse) -> str:
    """Render a response as indented JSON."""
    return json.dumps(response.to_dict(), indent=2)


def folder_service_from_config(config: AppConfig) -> FolderService:
    """Construct a FolderService from application configuration.

    Args:
        config: Application configuration instance.

    Returns:
        FolderService wired to the configured data source.
    """
    return FolderService(fetcher=folder_fetcher_from_config(config))
