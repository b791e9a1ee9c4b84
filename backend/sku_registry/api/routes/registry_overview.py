"""Registry Overview: aggregate stats and the vocabulary that feeds the composer."""

from fastapi import APIRouter, Depends

from sku_registry.api.dependencies import get_current_user
from sku_registry.models.user import User
from sku_registry.schemas.sku import StatsResponse, VocabularyResponse
from sku_registry.services.registry_provider import get_registry
from sku_registry.services.sku_registry import SkuRegistry

router = APIRouter(prefix="/api/v1", tags=["registry"])


@router.get("/stats", response_model=StatsResponse)
async def registry_stats(
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    """Total, colliding-identity and unique counts."""
    return StatsResponse.from_stats(await registry.compute_stats())


@router.get("/vocabulary", response_model=VocabularyResponse)
async def vocabulary(
    registry: SkuRegistry = Depends(get_registry),
    user: User = Depends(get_current_user),
):
    return VocabularyResponse(**registry.vocabulary.to_dict())
