from .errors import InvalidTrailingSlashError
from .exceptions import ApiError, HttpResponseError, RequestFailure
from .outcome import Failure, Outcome, Success
from .request_options import RequestOptions
from .trailing_slash import TrailingSlash

__all__ = [
    "InvalidTrailingSlashError",
    "ApiError",
    "HttpResponseError",
    "RequestFailure",
    "Failure",
    "Outcome",
    "Success",
    "RequestOptions",
    "TrailingSlash",
]
