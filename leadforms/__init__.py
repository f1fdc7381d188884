"""Onboarding lead-capture forms for Vyral PEO."""
