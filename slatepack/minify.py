from __future__ import annotations

import json as _json


def minify_json(text: str) -> str:
    """Re-serialize a JSON document without insignificant whitespace.

    Key order and non-ASCII characters are preserved. Raises ValueError
    (json.JSONDecodeError) when ``text`` is not JSON.
    """
    return _json.dumps(_json.loads(text), separators=(",", ":"), ensure_ascii=False)
