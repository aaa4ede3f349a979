"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; feed source strings straight to the code under test.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
