"""CLI commands.

Every .py file in this package that defines a `command` object is
auto-registered by palette_engine.registry.discover().
"""
