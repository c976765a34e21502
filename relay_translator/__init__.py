"""
Relay Translator: telephone-game translation through a random intermediate language
"""

__version__ = "1.0.0"
