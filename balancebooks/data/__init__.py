"""Record types for bookkeeping data."""
