"""Command modules for palette-tool.

Every .py file in this package that defines a `command` object is
auto-registered by palette_kit.registry.discover().
"""
