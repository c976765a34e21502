"""
Core relay translation modules

Note: To prevent circular import issues (the logger depends on
core.exceptions), nothing is re-exported here. Import from the modules:

    from relay_translator.core.orchestrator import RelayOrchestrator
    from relay_translator.core.context import build_relay_context
"""

__all__ = []
