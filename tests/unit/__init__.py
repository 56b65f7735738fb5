"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; pass settings and environment mappings explicitly.
- Prefer behavior-centric assertions over implementation details.
"""
