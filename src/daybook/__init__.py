"""Daybook - a single markdown file kept as a newest-first daily journal."""
