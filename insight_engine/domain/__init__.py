"""
Domain layer.

Entities, value objects and the pure analyzers of the insight engine.
"""
