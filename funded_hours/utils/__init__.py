"""
Utility functions module.

Date handling shared across the engine.

Time Semantics:
- Every helper takes the reference date explicitly
- ``today`` is the only place the wall clock is read, and accepts an
  injected clock so callers and tests can pin "now"
- The term-week estimate is an approximation anchored on one term start
"""
