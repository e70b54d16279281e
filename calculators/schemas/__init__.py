"""Pydantic data contracts for the calculators."""
