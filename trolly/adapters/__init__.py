"""Storage adapters behind the core interfaces."""
