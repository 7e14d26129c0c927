"""
Boundary layer for external system integrations.

Handles all interactions with external systems (PostgreSQL, S3, the headless render engine).
Provides adapters and clients for infrastructure dependencies.
"""
