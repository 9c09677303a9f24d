"""Test fixtures and builders."""
