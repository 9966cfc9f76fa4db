"""Deal pipeline routes."""

from fastapi import APIRouter

from dealmetrics.api.formatting import money
from dealmetrics.api.schemas import CommissionRequest, CommissionResponse
from dealmetrics.engine.commission import DealCommissionInputs, resolve_commission

router = APIRouter(prefix="/api/v1/deals", tags=["deals"])


@router.post("/commission", response_model=CommissionResponse)
async def expected_commission(req: CommissionRequest):
    resolved = resolve_commission(
        DealCommissionInputs(
            price=req.price,
            commission_percent=req.commission_percent,
            commission_amount=req.commission_amount,
        )
    )
    return CommissionResponse(amount=money(resolved.amount), source=resolved.source.value)
