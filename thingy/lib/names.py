"""Subcommand name forms: canonical (underscores) and display (hyphens)."""
from __future__ import annotations

def normalize(token: str) -> str:
	"""Map a user-typed subcommand to its canonical method-name form."""
	return token.replace('-', '_')

def to_display(canonical: str) -> str:
	"""Presentation form of a canonical name. Never used for lookup."""
	return canonical.replace('_', '-')
