"""Multilingual mandi negotiation backend."""
