"""Test suite for stepscope.

Organized into three categories:

1. core/: Unit tests for the execution context, label buffer,
   step executor and reporting facade
   - Uses in-memory fakes for ports

2. adapters/: Tests for the reference adapters
   - In-memory report model, file-system attachment store

3. fakes/: Port implementations for testing
   - Record every call into a shared event log for ordering assertions
"""
