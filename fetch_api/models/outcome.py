from typing import Any, Literal, NoReturn, Union

from httpx import Response
from pydantic import BaseModel, ConfigDict

from .exceptions import ApiError, HttpResponseError


class Success(BaseModel):
    """A 2xx response, with its JSON body or ``None``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None

    @property
    def ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> Any:
        return self.value


class Failure(BaseModel):
    """A non-2xx response.

    ``error`` holds the parsed JSON error body when the server declared one,
    otherwise it is the response itself.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: Any
    response: Response

    @property
    def ok(self) -> Literal[False]:
        return False

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def is_declared(self) -> bool:
        """Whether ``error`` is a parsed JSON body rather than the raw response."""
        return self.error is not self.response

    def unwrap(self) -> NoReturn:
        if self.is_declared:
            raise ApiError(self)
        raise HttpResponseError(self)


Outcome = Union[Success, Failure]
