"""
Configuration module - Environment-backed settings shared by the AI providers and the API server.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
