"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import Response

from metabolikal.api.models import CSVContentRequest  # noqa: TC001
from metabolikal.domain.food_items import TEMPLATE_FILENAME, TEMPLATE_MEDIA_TYPE
from metabolikal.services.csv_import import get_valid_food_items, is_parse_failure

if TYPE_CHECKING:
    from metabolikal.containers import AppContainer
    from metabolikal.domain.food_items import CSVParseResult

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/food-items/template", dependencies=[Depends(require_admin)])
async def food_items_template(request: Request) -> Response:
    """Download the food item CSV template."""
    container: AppContainer = request.app.state.container
    return Response(
        content=container.food_import_service.template(),
        media_type=TEMPLATE_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )


@router.post("/food-items/import/preview", dependencies=[Depends(require_admin)])
async def preview_food_items(
    payload: CSVContentRequest, request: Request
) -> dict[str, object]:
    """Validate CSV content without importing it."""
    container: AppContainer = request.app.state.container
    result = container.food_import_service.preview(payload.content)
    _raise_on_parse_failure(result)
    return asdict(result)


@router.post("/food-items/import", dependencies=[Depends(require_admin)])
async def import_food_items(
    payload: CSVContentRequest, request: Request
) -> dict[str, object]:
    """Validate CSV content and insert its valid rows."""
    container: AppContainer = request.app.state.container
    result = container.food_import_service.preview(payload.content)
    _raise_on_parse_failure(result)
    summary = container.food_import_service.import_items(get_valid_food_items(result))
    return {
        "total_rows": result.total_rows,
        "valid_rows": result.valid_rows,
        "invalid_rows": result.invalid_rows,
        "parse_errors": result.parse_errors,
        "summary": asdict(summary),
    }


def _raise_on_parse_failure(result: CSVParseResult) -> None:
    if is_parse_failure(result):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to parse CSV: {', '.join(result.parse_errors)}",
        )
