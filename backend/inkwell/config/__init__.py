from .settings import Settings, validate_settings

__all__ = ["Settings", "validate_settings"]
