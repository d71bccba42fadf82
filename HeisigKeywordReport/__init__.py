"""Heisig keyword comparison report.

Loads the Heisig reference list, scrapes the matching jpdb.io keyword for every
kanji and writes a CSV and an HTML table per edition.
"""
