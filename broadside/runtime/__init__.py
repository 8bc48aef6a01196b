"""Generic runtime primitives: event bus, flow machine, logging pipeline."""
