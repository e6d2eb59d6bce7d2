from .loader import ConfigLoader, soupboard_config

__all__ = ["ConfigLoader", "soupboard_config"]
