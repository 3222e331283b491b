"""Royale Decks backend package."""
