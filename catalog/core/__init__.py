"""Core configuration, enums and dependency container."""
