"""Adapters – concrete backing stores for the log ports."""
