"""Shared dataclasses: configuration and kanji records."""
