import json
import logging
import re
from typing import Any, Dict, Optional

from ..exceptions import MalformedResponse

logger = logging.getLogger(__name__)

_FENCED = re.compile(r"\A```[A-Za-z0-9_-]*[ \t]*\n?(?P<body>.*?)\n?[ \t]*```\Z", re.DOTALL)


def strip_code_fences(text: str) -> Optional[str]:
    """
    Remove a leading ```/```json marker and a trailing ``` marker.

    Returns None unless both markers are present.
    """
    match = _FENCED.match(text.strip())
    if match is None:
        return None
    return match.group("body")


class JSONWrapper:
    """
    Decode generated text into a JSON object.

    The decode is strict. The only repair is an optional single retry after
    stripping a surrounding markdown code fence.
    """

    def __init__(self, strip_fences: bool = True) -> None:
        self.strip_fences = strip_fences

    def __call__(self, raw: str) -> Dict[str, Any]:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            body = strip_code_fences(raw) if self.strip_fences else None
            if body is None:
                raise MalformedResponse(f"Response is not valid JSON: {e}", raw=raw) from e
            logger.debug("Retrying JSON decode after stripping code fences")
            try:
                data = json.loads(body)
            except json.JSONDecodeError as e2:
                raise MalformedResponse(
                    f"Response is not valid JSON after fence trim: {e2}", raw=raw
                ) from e2

        if not isinstance(data, dict):
            raise MalformedResponse(
                f"Expected a JSON object, got {type(data).__name__}", raw=raw
            )
        return data
