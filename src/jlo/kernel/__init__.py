"""Kernel – errors, time and concurrency primitives shared by every layer."""
