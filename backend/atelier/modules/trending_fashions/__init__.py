"""Trending fashion entries.

Not owner-scoped: every authenticated user sees the same entries. Each entry
points at a clothing design, embedded as ``design: {id, designName}`` on read.
"""
