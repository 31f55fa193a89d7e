"""
Utility functions module.

Rounding and time helpers shared by the models and the indicator library.
Rounding is half-up and is applied only when values are serialized.
"""
