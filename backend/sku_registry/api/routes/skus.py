"""SKU Routes: create, compose, list, delete, import and export issued SKUs.

Invariants:
    - Every endpoint requires a bearer token (get_current_user)
    - Routes never decide uniqueness; SkuRegistry does, under its lock
    - DELETE is idempotent: unknown ids still answer 200
    - CSV import feeds the same import_batch as JSON import, under the same line cap

Design Decisions:
    - Caller id passed to the registry as issued_by; the registry stays identity-agnostic
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from sku_registry.api.dependencies import get_current_user
from sku_registry.core.csv_format import (
    parse_import_csv, render_export_csv, export_filename,
)
from sku_registry.core.domain_types import SkuId, MAX_IMPORT_LINES, utc_now
from sku_registry.core.errors import SkuValidationError
from sku_registry.models.user import User
from sku_registry.schemas.sku import (
    SkuCreate, SkuCompose, SkuImport, SkuResponse, ImportResponse,
)
from sku_registry.services.registry_provider import get_registry
from sku_registry.services.sku_registry import SkuRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/skus", tags=["skus"])


@router.get("", response_model=list[SkuResponse])
async def list_skus(
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """List issued SKUs, most recent first."""
    records = await registry.list_records()
    return [SkuResponse.from_record(r) for r in records]


@router.post(
    "", response_model=SkuResponse, status_code=status.HTTP_201_CREATED,
)
async def create_sku(
    body: SkuCreate,
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Register an already-composed code (stored uppercased)."""
    record = await registry.register(body.code, issued_by=str(user.id))
    return SkuResponse.from_record(record)


@router.post(
    "/compose", response_model=SkuResponse,
    status_code=status.HTTP_201_CREATED,
)
async def compose_sku(
    body: SkuCompose,
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Compose a code from vocabulary tokens and register it."""
    record = await registry.compose_and_register(
        body.stone, body.metal, body.product, body.mode,
        corporate_client=body.corporate_client,
        custom_suffix=body.custom_suffix,
        issued_by=str(user.id),
    )
    return SkuResponse.from_record(record)


@router.delete("/{sku_id}")
async def delete_sku(
    sku_id: UUID,
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Delete by id. Missing ids are not an error."""
    await registry.delete_record(SkuId(sku_id))
    return {"message": "Deleted"}


@router.post("/import", response_model=ImportResponse)
async def import_skus(
    body: SkuImport,
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Bulk import; header/blank lines dropped, duplicates tallied."""
    result = await registry.import_batch(body.codes, issued_by=str(user.id))
    return ImportResponse.from_result(result)


@router.post("/import/csv", response_model=ImportResponse)
async def import_skus_csv(
    file: UploadFile = File(...),
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Bulk import from an uploaded CSV; only the first column is read."""
    content = await file.read()
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise SkuValidationError("CSV file must be UTF-8 text", "file") from None
    lines = parse_import_csv(text)
    if len(lines) > MAX_IMPORT_LINES:
        raise SkuValidationError(
            f"CSV file has more than {MAX_IMPORT_LINES} lines", "file",
        )
    result = await registry.import_batch(lines, issued_by=str(user.id))
    return ImportResponse.from_result(result)


@router.get("/export")
async def export_skus(
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Download all SKUs as SKU,Timestamp CSV."""
    records = await registry.list_records()
    filename = export_filename(utc_now().date())
    return Response(
        content=render_export_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
