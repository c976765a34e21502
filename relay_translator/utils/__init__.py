"""
Utility modules

Import helpers directly from their module:

    from relay_translator.utils.unified_logger import UnifiedLogger
"""

__all__ = []
