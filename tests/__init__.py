"""Test suite for colortokens.

Test Structure:
- unit/: Unit tests for individual components, mirroring the package layout
- integration/: End-to-end session tests against in-memory hosts
- fixtures/: Builders and sample design documents
- conftest.py: Shared fixtures
"""
