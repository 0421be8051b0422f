"""merkleproof constants.

All magic values live here. No exceptions.
"""

# Hashing
DEFAULT_HASH_ALGORITHM = "sha256"
STR_ENCODING = "utf-8"

# Receipts
TENANT_ID = "merkleproof"
REQUIRED_FIELDS = ["receipt_type", "ts", "tenant_id", "payload_hash"]

# Proof rendering
POSITION_LEFT = "left"
POSITION_RIGHT = "right"

# CLI
HEX_PREVIEW_CHARS = 32
