"""Testbed API.

An in-memory REST service with:
- CRUD over users, create/update over products
- Health, readiness and version probes
- Slow, failing and clock-parity endpoints for test harnesses

Usage:
    ./start_server.py  # From repo root
"""
