"""Adapters – bridges between jlo and third-party logging front ends."""
