"""
Feature modules for velotrack.

Each feature is a self-contained module with:
- models.py - Domain values
- schemas.py - Pydantic schemas
- service.py - Business logic
"""
