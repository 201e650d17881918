"""
Share-link state encoding for home purchase scenarios.

A scenario is packed into a compact JSON array of its 19 parameters, base64
encoded and made URL safe, and carried in the ``s`` query parameter. Decoding
never raises: any malformed token yields the caller-supplied defaults so the
page can always render. The older one-parameter-per-field query format is still
understood when no ``s`` parameter is present.
"""

import base64
import json
import logging
from typing import Any, Dict, List, Tuple
from urllib.parse import parse_qsl

from mortgage_planner.models.scenario import ScenarioInput

logger = logging.getLogger(__name__)

STATE_PARAM = "s"

# (section, field, legacy query key) in token order
FIELD_LAYOUT: List[Tuple[str, str, str]] = [
    ("property", "price", "pp"),
    ("property", "closing_costs", "pcc"),
    ("property", "growth", "pg"),
    ("property", "maintenance", "pm"),
    ("property", "taxes", "pt"),
    ("mortgage", "amount", "ma"),
    ("mortgage", "term", "mte"),
    ("mortgage", "type", "mty"),
    ("mortgage", "fixed_rate", "mfr"),
    ("mortgage", "var_current", "mvc"),
    ("mortgage", "var_expected", "mve"),
    ("investing", "annual_return", "ir"),
    ("investing", "inflation", "ii"),
    ("investing", "invest_upfront", "iup"),
    ("profile", "net_income", "pms"),
    ("profile", "age", "pag"),
    ("profile", "other_debts_monthly", "pod"),
    ("pledge", "amount", "pla"),
    ("pledge", "ltv", "plt"),
]

_TO_URL_SAFE = str.maketrans({"+": "-", "/": "_", "=": "~"})
_FROM_URL_SAFE = str.maketrans({"-": "+", "_": "/", "~": "="})


class ShareStateError(ValueError):
    """Raised internally when a share token has an invalid structure."""


def _compact_number(value: Any) -> Any:
    # 350000.0 -> 350000 keeps tokens short; json floats round-trip exactly
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _encode_field(field: str, value: Any) -> Any:
    if field == "type":
        return 0 if value == "fixed" else 1
    if field == "invest_upfront":
        return 1 if value else 0
    return _compact_number(value)


def encode_token(scenario: ScenarioInput) -> str:
    """
    Serialize a scenario into a URL-safe token.

    Args:
        scenario: Scenario to serialize

    Returns:
        Base64 token with ``+/=`` replaced by ``-_~``
    """
    compact = [
        _encode_field(field, getattr(getattr(scenario, section), field))
        for section, field, _ in FIELD_LAYOUT
    ]
    payload = json.dumps(compact, separators=(",", ":"))
    encoded = base64.b64encode(payload.encode("ascii")).decode("ascii")
    return encoded.translate(_TO_URL_SAFE)


def encode_state(scenario: ScenarioInput) -> str:
    """Serialize a scenario into a query string fragment, ``s=<token>``."""
    return f"{STATE_PARAM}={encode_token(scenario)}"


def share_url(scenario: ScenarioInput, base_url: str) -> str:
    """Full shareable URL for a scenario."""
    return f"{base_url}?{encode_state(scenario)}"


def _decode_compact(token: str, defaults: ScenarioInput) -> ScenarioInput:
    raw = base64.b64decode(token.translate(_FROM_URL_SAFE), validate=True)
    compact = json.loads(raw.decode("utf-8"))
    if not isinstance(compact, list):
        raise ShareStateError(f"Expected a JSON array, got {type(compact).__name__}")

    data: Dict[str, Dict[str, Any]] = defaults.model_dump()
    for index, (section, field, _) in enumerate(FIELD_LAYOUT):
        value = compact[index] if index < len(compact) else None
        if value is None:
            continue
        if field == "type":
            value = "fixed" if value == 0 else "variable"
        elif field == "invest_upfront":
            value = value == 1
        data[section][field] = value

    return ScenarioInput.model_validate(data)


def _decode_legacy(params: Dict[str, str], defaults: ScenarioInput) -> ScenarioInput:
    data: Dict[str, Dict[str, Any]] = defaults.model_dump()
    for section, field, key in FIELD_LAYOUT:
        if key not in params:
            continue
        raw = params[key]
        if field == "type":
            value: Any = raw
        elif field == "invest_upfront":
            value = raw == "1"
        else:
            value = float(raw)
        data[section][field] = value

    return ScenarioInput.model_validate(data)


def decode_state(query: str, defaults: ScenarioInput) -> ScenarioInput:
    """
    Deserialize a query string back into a scenario.

    Args:
        query: Query string, with or without a leading ``?``
        defaults: Scenario supplying every missing field, and returned as-is
            when the query cannot be decoded

    Returns:
        Decoded ScenarioInput, or ``defaults``
    """
    if not query:
        return defaults

    try:
        params = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))

        token = params.get(STATE_PARAM)
        if token:
            return _decode_compact(token, defaults)

        return _decode_legacy(params, defaults)
    except (ValueError, TypeError, RecursionError) as e:
        # binascii, json and pydantic errors are all ValueErrors; deeply nested
        # JSON exhausts the decoder stack
        logger.warning(f"Failed to decode share state: {e}")
        return defaults
