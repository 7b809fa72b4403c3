from enum import Enum


class TrailingSlash(str, Enum):
    """Whether request paths get terminated with ``/``.

    ``WRITE_ONLY`` terminates every path except those of ``GET`` requests.
    """

    ALWAYS = "always"
    NONE = "none"
    WRITE_ONLY = "write_only"
