"""palette_engine.core — Colour extraction and harmony engine.

Contains channel validation, colour space conversion, distance, harmony,
the pixel locator, quantizers and the palette assembler.
This module has NO dependencies on palette_engine.commands or palette_engine.registry.
Only stdlib, numpy, PIL and scikit-learn are allowed here.
"""
