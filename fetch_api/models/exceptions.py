from typing import TYPE_CHECKING, Any

from httpx import Response

if TYPE_CHECKING:
    from .outcome import Failure


class RequestFailure(Exception):
    """A request completed with a status outside the 2xx range.

    Attributes:
        failure (Failure): The classified outcome.
        error (Any): The parsed JSON error body, or the response for opaque errors.
        response (Response): The response as received.
    """

    def __init__(self, failure: "Failure") -> None:
        self.failure = failure

        try:
            url = str(failure.response.request.url)
        except RuntimeError:
            url = "Unknown"
        response_content = (
            failure.response.content.decode("utf-8", errors="replace")
            if failure.response.content
            else "No content"
        )

        enriched_message = (
            f"\nRequest URL: {url}"
            f"\nStatus Code: {failure.status_code}"
            f"\nResponse Content: {response_content}"
        )

        super().__init__(enriched_message)

    @property
    def error(self) -> Any:
        return self.failure.error

    @property
    def response(self) -> Response:
        return self.failure.response

    @property
    def status_code(self) -> int:
        return self.failure.status_code


class ApiError(RequestFailure):
    """The server answered with a JSON error body, available as ``error``."""


class HttpResponseError(RequestFailure):
    """The server answered without a JSON error body; ``error`` is the response."""
