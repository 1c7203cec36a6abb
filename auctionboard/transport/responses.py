"""JSON response rendering backed by orjson."""

from __future__ import annotations

from typing import Any

import orjson
from fastapi.responses import ORJSONResponse

_ORJSON_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NON_STR_KEYS


class OrjsonResponse(ORJSONResponse):
    """``ORJSONResponse`` with aware UTC datetimes rendered with a ``Z`` suffix."""

    def render(self, content: Any) -> bytes:
        return orjson.dumps(content, option=_ORJSON_OPTIONS)
