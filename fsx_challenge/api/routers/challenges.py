"""
API router for challenge generation.
"""
import logging
from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from pydantic import ValidationError

from fsx_challenge.api.dependencies import ChallengeServiceDep, limiter
from fsx_challenge.api.forms import INPUT_FORM
from fsx_challenge.api.models.requests import ChallengeQuery
from fsx_challenge.config import settings
from fsx_challenge.infrastructure.api_constants import APIConstants
from fsx_challenge.infrastructure.xml_codec import ChallengeEncodingError

logger = logging.getLogger(__name__)


router = APIRouter(
    tags=["challenges"],
)


@router.get(
    "/",
    response_class=Response,
    summary="Generate a random FSX challenge",
    description="""
    Without a query string, returns an HTML form for the challenge parameters.

    With a query string, places 20 stations at random yardages in
    [min, max), consecutive stations at least min_gap apart, and returns the
    course as an FSXChallenge XML document named after the yardage range and
    a short hash of the drawn distances.

    Query parameters (yards unless noted):
    - min, max: station distance range (required)
    - min_gap: minimum difference between consecutive stations (default 10)
    - inner_ring, mid_ring, outer_ring: ring diameters (default 8, 16, 24)
    - inner_score, mid_score, outer_score: points (default 5, 3, 1)
    """,
    responses={
        200: {
            "description": "Input form, or the generated challenge",
            "content": {
                APIConstants.CONTENT_TYPE_HTML: {},
                APIConstants.CONTENT_TYPE_XML: {},
            },
        },
        422: {
            "description": "Missing or malformed query parameter, or infeasible placement",
        },
        429: {
            "description": "Rate limit exceeded",
        },
        500: {
            "description": "XML encoding failure",
            "content": {"text/plain": {}},
        },
    },
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
def get_challenge(
    request: Request,
    challenge_service: ChallengeServiceDep,
) -> Response:
    """
    Serve the input form or a freshly generated challenge.

    Args:
        request: Incoming request (query string parsed here)
        challenge_service: Challenge service (injected dependency)

    Returns:
        HTML form, XML challenge document, or plain-text encoding error

    Raises:
        RequestValidationError: If the query string is incomplete or malformed
    """
    if not request.query_params:
        logger.debug("No query string, serving input form")
        return HTMLResponse(INPUT_FORM)

    try:
        query = ChallengeQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RequestValidationError(
            e.errors(include_url=False, include_context=False)
        )

    try:
        challenge, document = challenge_service.export(query.to_parameters())
    except ChallengeEncodingError as e:
        logger.error(f"Challenge export failed: {e}")
        return PlainTextResponse(
            f"Error: {e}",
            status_code=500,
        )

    return Response(
        content=document,
        media_type=APIConstants.CONTENT_TYPE_XML,
        headers={
            "Content-Disposition": APIConstants.content_disposition(challenge.name),
        },
    )
