"""Feature flags for merkleproof.

Flags are plain module constants, read at call time so tests and the CLI
can flip them.
"""

# Receipts: print every emitted receipt as a JSON line on stdout.
# The receipt dict is still built and returned when this is off.
FEATURE_RECEIPTS_ENABLED = True
