"""Kernel – errors, clock and id generation shared by every layer."""
