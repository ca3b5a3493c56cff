"""
Core setup engine.

This package contains the availability probes and the `SetupManager`, which
drives the pipeline from the PATH check through to the PATH guidance.
"""
