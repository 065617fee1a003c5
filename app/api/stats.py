from fastapi import APIRouter, Depends, HTTPException
from app.schemas.stats import RatingsEvent
from app.services.stats import StatsService, get_stats_service
from app.utils.encoding import StatsJSONResponse
from app.core.exceptions import StatsError
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/", response_class=StatsJSONResponse)
async def compute_stats(
    event: RatingsEvent,
    stats_service: StatsService = Depends(get_stats_service),
):
    try:
        stats = stats_service.compute(event)
    except StatsError as e:
        logger.warning(f"Failed to aggregate ratings: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return StatsJSONResponse(content=stats)

@router.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
