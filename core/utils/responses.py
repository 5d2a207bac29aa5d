"""
Envelopes wrapped around every evaluation result the API returns.

Each body carries ``status`` ("success" or "error"), a human readable
``message`` and the computed ``data``. List results also carry ``count`` so
the dashboard can size tables and charts without walking ``data``.
"""

from typing import Any, Dict, Optional, Sequence


def success_response(
    data: Any = None, message: str = "Success", count: Optional[int] = None
) -> Dict[str, Any]:
    response = {"status": "success", "message": message, "data": data}
    if count is not None:
        response["count"] = count
    return response


def list_response(items: Sequence[Any], message: str = "Success") -> Dict[str, Any]:
    """Success envelope for evaluations, chart rows or insight lines."""
    return success_response(list(items), message=message, count=len(items))


def error_response(message: str, code: int = 400) -> Dict[str, Any]:
    """
    Envelope for an evaluation that could not be completed.

    ``data`` is present but empty so clients can read the same keys from
    either envelope.
    """
    return {"status": "error", "message": message, "code": code, "data": None}
