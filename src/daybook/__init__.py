"""Daybook - plain-text journal, one file per day."""
