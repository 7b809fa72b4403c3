from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import DEFAULT_CSRF_COOKIE_NAME, DEFAULT_CSRF_HEADER_NAME
from .models.errors import InvalidTrailingSlashError
from .models.trailing_slash import TrailingSlash


class Config(BaseModel):
    """Settings shared by every request of one client.

    Assignments are validated, so ``base_url`` loses its trailing slash however
    it is set.
    """

    model_config = ConfigDict(validate_assignment=True)

    base_url: str = ""
    default_headers: Dict[str, str] = Field(default_factory=dict)
    csrf_cookie_name: str = DEFAULT_CSRF_COOKIE_NAME
    csrf_header_name: str = DEFAULT_CSRF_HEADER_NAME
    trailing_slash: TrailingSlash = TrailingSlash.WRITE_ONLY

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if value.endswith("/"):
            return value[:-1]
        return value

    @field_validator("default_headers")
    @classmethod
    def _copy_headers(cls, value: Dict[str, str]) -> Dict[str, str]:
        return dict(value)

    def update(
        self,
        *,
        base_url: Optional[str] = None,
        default_headers: Optional[Dict[str, str]] = None,
        csrf_cookie_name: Optional[str] = None,
        csrf_header_name: Optional[str] = None,
        trailing_slash: Optional[Any] = None,
    ) -> None:
        """Overwrite the given settings in place.

        Falsy values (``None``, ``""``, ``{}``) leave the current setting
        untouched, nothing is reset to its default.

        Raises:
            InvalidTrailingSlashError: If ``trailing_slash`` names no known policy.
        """
        if trailing_slash:
            try:
                trailing_slash = TrailingSlash(trailing_slash)
            except ValueError as e:
                raise InvalidTrailingSlashError(trailing_slash) from e

        changes = {
            "base_url": base_url,
            "default_headers": default_headers,
            "csrf_cookie_name": csrf_cookie_name,
            "csrf_header_name": csrf_header_name,
            "trailing_slash": trailing_slash,
        }

        for name, value in changes.items():
            if value:
                setattr(self, name, value)
