from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from homestay.dependencies import SessionDep, VoucherDep
from homestay.schemas.booking import VoucherResolution, VoucherStatus

router = APIRouter()

_STATUS_CODES = {
    VoucherStatus.empty_code: 422,
    VoucherStatus.lookup_failed: 502,
}


class VoucherValidateRequest(BaseModel):
    code: str = ""


@router.post("/vouchers/validate", response_model=VoucherResolution)
async def validate_voucher(
    request: VoucherValidateRequest,
    service: VoucherDep,
    session: SessionDep,
) -> VoucherResolution:
    resolution = await service.resolve(request.code, session)
    if resolution.status in _STATUS_CODES:
        return JSONResponse(
            status_code=_STATUS_CODES[resolution.status],
            content=resolution.model_dump(mode="json", by_alias=True),
        )
    return resolution
