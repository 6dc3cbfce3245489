"""Foundation utilities for shared infrastructure components.

This package provides shared utilities including:
- Structured JSON logging
- Async circuit breaker for the database client
- Readiness state tracking for Kubernetes probes
"""
