"""Receipt emission for merkleproof operations.

Functions:
    dual_hash: SHA256:BLAKE3 dual-hash string of a payload
    emit_receipt: Emit receipt with required fields to stdout
"""
import hashlib
import json
from datetime import datetime, timezone

import blake3

from ..config import features
from .constants import STR_ENCODING, TENANT_ID


def dual_hash(data: bytes | str | dict) -> str:
    """Compute dual hash in format 'sha256hex:blake3hex'.

    Pure function with no side effects.

    Args:
        data: Bytes, string, or dict to hash

    Returns:
        String in format 'sha256hex:blake3hex' (both 64 hex chars)
    """
    if isinstance(data, dict):
        data = json.dumps(data, sort_keys=True, separators=(",", ":"))
    if isinstance(data, str):
        data = data.encode(STR_ENCODING)

    sha256_hex = hashlib.sha256(data).hexdigest()
    blake3_hex = blake3.blake3(data).hexdigest()

    return f"{sha256_hex}:{blake3_hex}"


def emit_receipt(receipt_type: str, data: dict, tenant_id: str = TENANT_ID) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True when FEATURE_RECEIPTS_ENABLED.

    Args:
        receipt_type: Type of receipt (merkle_tree_build, merkle_proof, ...)
        data: Receipt payload data, JSON-serializable
        tenant_id: Tenant identifier

    Returns:
        Complete receipt dict with receipt_type, ts, tenant_id, payload_hash
    """
    tenant_id = data.get("tenant_id", tenant_id)

    payload_bytes = json.dumps(data, sort_keys=True).encode(STR_ENCODING)

    receipt = {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "tenant_id": tenant_id,
        "payload_hash": dual_hash(payload_bytes),
        **data
    }

    if features.FEATURE_RECEIPTS_ENABLED:
        print(json.dumps(receipt, sort_keys=True), flush=True)

    return receipt
