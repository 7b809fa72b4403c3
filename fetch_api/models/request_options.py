from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class RequestOptions(BaseModel):
    """Per-call request options.

    ``params`` values may be strings, numbers, booleans or ``None``; ``None``
    values are left out of the query string. ``data`` is any JSON-serializable
    value and is sent as the request body unless it is ``None``.
    """

    model_config = ConfigDict(extra="forbid")

    params: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    data: Any = None

    @property
    def has_body(self) -> bool:
        return self.data is not None
