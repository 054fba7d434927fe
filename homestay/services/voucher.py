import logging

import httpx
from pydantic import ValidationError

from homestay.schemas.booking import Voucher, VoucherResolution, VoucherStatus
from homestay.session import Session

logger = logging.getLogger(__name__)

VALIDATE_PATH = "/utils/voucher/validate"

EMPTY_CODE_MESSAGE = "Please enter a voucher code"
INVALID_MESSAGE = "Invalid or expired voucher"
LOOKUP_FAILED_MESSAGE = "Could not validate voucher"


class VoucherService:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._url = base_url.rstrip("/") + VALIDATE_PATH

    async def resolve(self, code: str | None, session: Session | None = None) -> VoucherResolution:
        """Look up a voucher code. Never raises for business outcomes.

        Blank codes are rejected before any request. A 4xx or an unreadable
        body means the voucher is invalid; transport errors, 429 and 5xx mean
        the lookup itself failed. Every call hits the backend (no cache, no retry).

        Lookups that can overlap (the user edits the code while one is in
        flight) should go through ``LatestRequestGuard.latest(service.resolve(code))``
        so an older response arriving late is dropped instead of applied.
        """
        code = (code or "").strip()
        if not code:
            return VoucherResolution(status=VoucherStatus.empty_code, message=EMPTY_CODE_MESSAGE)

        headers = session.auth_headers() if session else {}
        try:
            resp = await self._client.post(self._url, json={"code": code}, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Voucher lookup for %s failed: %s", code, exc)
            return _lookup_failed()

        if resp.status_code == 429 or resp.status_code >= 500:
            logger.warning("Voucher lookup for %s failed (status=%s)", code, resp.status_code)
            return _lookup_failed()
        if resp.status_code >= 400:
            logger.info("Voucher %s rejected (status=%s)", code, resp.status_code)
            return _invalid()

        voucher = self._parse_voucher(resp, code)
        if voucher is None:
            return _invalid()

        logger.info("Voucher %s valid: %s%% off", voucher.code, voucher.discount_percent)
        return VoucherResolution(status=VoucherStatus.valid, voucher=voucher)

    @staticmethod
    def _parse_voucher(resp: httpx.Response, code: str) -> Voucher | None:
        try:
            payload = resp.json()
        except ValueError:
            logger.info("Voucher %s: response is not JSON", code)
            return None
        if not isinstance(payload, dict):
            logger.info("Voucher %s: unexpected response %r", code, payload)
            return None
        try:
            return Voucher.model_validate({"code": code, **payload})
        except ValidationError:
            logger.info("Voucher %s: malformed response %s", code, payload)
            return None


def _invalid() -> VoucherResolution:
    return VoucherResolution(status=VoucherStatus.invalid, message=INVALID_MESSAGE)


def _lookup_failed() -> VoucherResolution:
    return VoucherResolution(status=VoucherStatus.lookup_failed, message=LOOKUP_FAILED_MESSAGE)
