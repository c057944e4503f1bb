"""Member resolution for completion and hover, built on inferred semantic facts.

Modules:
- model.py: Member types, locations and the semantic fact records.
- classify.py: Merging a fact set into a single member type.
- docs.py: Deterministic documentation text and location listing.
- result.py: The MemberResult descriptor tying name, facts and type together.
- config.py: Settings read from MEMBERS__* environment variables.
- logging_config.py: loguru setup.
- exceptions.py: Error types.
"""

__all__ = [
	"model",
	"classify",
	"docs",
	"result",
	"config",
	"logging_config",
	"exceptions",
]
