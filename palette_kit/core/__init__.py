"""palette_kit.core: Foundation layer.

Contains colour conversion, contrast evaluation, palette generation,
serialization, state transitions, persistence and report rendering.
This module has NO dependencies on palette_kit.commands or palette_kit.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
