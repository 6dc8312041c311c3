"""Concrete adapters for kv-cache-client."""
