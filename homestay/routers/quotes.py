from fastapi import APIRouter
from fastapi.responses import JSONResponse

from homestay.dependencies import BookingRequestDep, QuoteDep, SessionDep
from homestay.schemas.booking import QuoteError, QuoteResult

router = APIRouter()


def quote_error_response(result: QuoteResult) -> JSONResponse:
    # A failed lookup is the backend's fault; everything else needs user input
    status_code = 502 if result.error == QuoteError.voucher_lookup_failed else 422
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.post("/quotes", response_model=QuoteResult)
async def create_quote(
    request: BookingRequestDep,
    service: QuoteDep,
    session: SessionDep,
) -> QuoteResult:
    result = await service.compute_quote(request, session=session)
    if not result.ok:
        return quote_error_response(result)
    return result
