"""Pydantic schemas for results and API payloads."""
