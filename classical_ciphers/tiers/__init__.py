"""Cipher tiers, one module per cipher, ordered roughly by sophistication."""
