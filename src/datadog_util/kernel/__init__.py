"""Kernel – errors, clock and cancellation primitives shared by every layer."""
