from logging import getLogger

from httpx import Response

from ..models.outcome import Failure, Outcome, Success
from .constants import APPLICATION_JSON, HEADER_CONTENT_TYPE

logger = getLogger("fetch_api")


def is_json_response(response: Response) -> bool:
    # exact match, a charset parameter makes the body opaque
    return response.headers.get(HEADER_CONTENT_TYPE) == APPLICATION_JSON


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpret(response: Response) -> Outcome:
    """Classify a response into a success or a failure.

    Only the 2xx boundary and the declared content type are considered:

    - 2xx: ``Success`` with the parsed JSON body, or ``None`` for any other
      content type.
    - otherwise, JSON: ``Failure`` carrying the parsed error body.
    - otherwise: ``Failure`` carrying the response itself.

    Args:
        response (Response): A response whose body has been read.

    Returns:
        Outcome: Exactly one of ``Success`` or ``Failure``.

    Raises:
        json.JSONDecodeError: If a body declared as JSON does not parse.
    """
    is_json = is_json_response(response)

    if is_success_status(response.status_code):
        logger.debug(f"Response: {response.status_code} -> success")
        return Success(value=response.json() if is_json else None)

    logger.debug(f"Response: {response.status_code} -> failure")
    if is_json:
        return Failure(error=response.json(), response=response)
    return Failure(error=response, response=response)
