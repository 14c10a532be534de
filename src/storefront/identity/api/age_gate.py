"""Age verification consent, kept in a browser cookie.

The cookie holds ``true``/``false`` as declared by the visitor on the age
gate. No server-side state is kept.
"""

from fastapi import APIRouter, Request, Response

from storefront.constants import AGE_CONSENT_COOKIE
from storefront.identity.api.schemas import AgeConsentRequest, AgeConsentResponse, StatusResponse

_ONE_YEAR_SECONDS = 365 * 24 * 60 * 60

age_gate_router = APIRouter(prefix="/age-verification", tags=["age-verification"])


def read_consent(cookie_value: str | None) -> bool | None:
    """Parse the cookie value; anything other than true/false counts as absent."""
    if cookie_value is None:
        return None
    normalized = cookie_value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


@age_gate_router.get("", response_model=AgeConsentResponse)
async def get_consent(request: Request) -> AgeConsentResponse:
    return AgeConsentResponse(is_adult=read_consent(request.cookies.get(AGE_CONSENT_COOKIE)))


@age_gate_router.post("", response_model=AgeConsentResponse)
async def set_consent(body: AgeConsentRequest, response: Response) -> AgeConsentResponse:
    response.set_cookie(
        AGE_CONSENT_COOKIE,
        "true" if body.is_adult else "false",
        max_age=_ONE_YEAR_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
    )
    return AgeConsentResponse(is_adult=body.is_adult)


@age_gate_router.delete("", response_model=StatusResponse)
async def clear_consent(response: Response) -> StatusResponse:
    response.delete_cookie(AGE_CONSENT_COOKIE, path="/", httponly=True, samesite="lax")
    return StatusResponse()
