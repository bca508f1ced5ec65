"""Clinic administration backend (Django + DRF + SimpleJWT)."""
