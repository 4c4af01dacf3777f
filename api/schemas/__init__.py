"""
API Schemas - Pydantic models for response validation

These schemas define the contract between the API and dashboard clients.
Separate from the plain dicts produced by the internet_pulse processing code.
"""
