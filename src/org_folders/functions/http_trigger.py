"""HTTP trigger blueprint — health check and folder listing endpoints."""

import json
import logging
import uuid
from typing import Any

import azure.functions as func

from org_folders import __version__
from org_folders.config import AppConfig, load_config
from org_folders.folders.models import FetchFolderRequest
from org_folders.folders.service import (
    InvalidPageSizeError,
    folder_service_from_config,
    render_response,
)
from org_folders.folders.token import InvalidTokenError

logger = logging.getLogger(__name__)

bp = func.Blueprint()

_TRUE_VALUES = frozenset({"true", "1", "yes"})
_FALSE_VALUES = frozenset({"false", "0", "no"})


class InvalidRequestError(ValueError):
    """Raised when a query parameter cannot be parsed."""


def _json_response(payload: dict[str, Any], status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(payload), status_code=status_code, mimetype="application/json"
    )


def _error_response(status_code: int, message: str) -> func.HttpResponse:
    return _json_response({"status": "error", "message": message}, status_code)


def _parse_request(req: func.HttpRequest, config: AppConfig) -> FetchFolderRequest:
    """Build a FetchFolderRequest from the ``org_id`` and ``include_deleted`` params."""
    raw_org_id = req.params.get("org_id")
    if raw_org_id:
        try:
            org_id = uuid.UUID(raw_org_id)
        except ValueError as exc:
            raise InvalidRequestError(f"org_id is not a valid UUID: {raw_org_id!r}") from exc
    else:
        # Configured default; a malformed value surfaces as a 500.
        org_id = uuid.UUID(config.default_org_id)

    raw_deleted = (req.params.get("include_deleted") or "true").lower()
    if raw_deleted in _TRUE_VALUES:
        include_deleted = True
    elif raw_deleted in _FALSE_VALUES:
        include_deleted = False
    else:
        raise InvalidRequestError(f"include_deleted is not a boolean: {raw_deleted!r}")

    return FetchFolderRequest(org_id=org_id, include_deleted=include_deleted)


def _parse_page_size(req: func.HttpRequest, config: AppConfig) -> int:
    """Read ``page_size``, falling back to the configured default.

    Non-positive values are passed through so the service rejects them.
    """
    raw = req.params.get("page_size")
    if not raw:
        return config.default_page_size
    try:
        page_size = int(raw)
    except ValueError as exc:
        raise InvalidRequestError(f"page_size is not an integer: {raw!r}") from exc
    if page_size > config.max_page_size:
        raise InvalidRequestError(
            f"page_size must not exceed {config.max_page_size}, got {page_size}"
        )
    return page_size


@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint.

    Returns service status and version.
    """
    logger.info("[health_check] health check requested")

    try:
        return _json_response({"status": "ok", "version": __version__}, 200)

    except Exception:
        logger.error("[health_check] health check failed", exc_info=True)
        return _error_response(500, "Internal server error")


@bp.route(route="folders", methods=["GET"], auth_level=func.AuthLevel.FUNCTION)
def list_folders(req: func.HttpRequest) -> func.HttpResponse:
    """Return one page of an organization's folders.

    Query parameters: ``org_id`` (defaults to the configured organization),
    ``page_size``, ``token`` (from the previous page) and ``include_deleted``.
    The response carries an empty ``token`` on the last page.
    """
    logger.info("[list_folders] folder page requested")

    try:
        config = load_config()
        fetch_req = _parse_request(req, config)
        page_size = _parse_page_size(req, config)
        token = req.params.get("token", "")

        service = folder_service_from_config(config)
        response = service.fetch_folders_with_pagination(fetch_req, page_size, token)

        logger.info(
            "[list_folders] page served; org_id:%s;folder_count:%d;has_more:%s",
            fetch_req.org_id,
            len(response.folders),
            bool(response.token),
        )
        return func.HttpResponse(
            render_response(response), status_code=200, mimetype="application/json"
        )

    except (InvalidRequestError, InvalidTokenError, InvalidPageSizeError) as exc:
        logger.warning("[list_folders] rejected request; reason:%s", exc)
        return _error_response(400, str(exc))

    except Exception:
        logger.error("[list_folders] folder listing failed", exc_info=True)
        return _error_response(500, "Internal server error")


@bp.route(route="folders/all", methods=["GET"], auth_level=func.AuthLevel.FUNCTION)
def list_all_folders(req: func.HttpRequest) -> func.HttpResponse:
    """Return every folder of an organization in a single response."""
    logger.info("[list_all_folders] full folder listing requested")

    try:
        config = load_config()
        fetch_req = _parse_request(req, config)

        service = folder_service_from_config(config)
        response = service.get_all_folders(fetch_req)

        return func.HttpResponse(
            render_response(response), status_code=200, mimetype="application/json"
        )

    except InvalidRequestError as exc:
        logger.warning("[list_all_folders] rejected request; reason:%s", exc)
        return _error_response(400, str(exc))

    except Exception:
        logger.error("[list_all_folders] folder listing failed", exc_info=True)
        return _error_response(500, "Internal server error")
