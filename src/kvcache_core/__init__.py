"""Domain contracts for kv-cache-client: interfaces, settings, errors."""
