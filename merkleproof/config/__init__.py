"""Configuration for merkleproof."""
