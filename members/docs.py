from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Set

from .classify import report_missing_fact
from .model import LocationInfo, MemberType, SemanticFact

SUMMARY_LABELS = {
	MemberType.INSTANCE: "Instance of ",
	MemberType.CONSTANT: "Constant ",
}
DEFAULT_SUMMARY_LABEL = "Value of "


def clean_documentation(doc: str) -> str:
	"""Normalize line endings, drop trailing whitespace and repeated blank lines, trim."""
	lines: List[str] = []
	blank_run = 0
	for line in doc.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
		line = line.rstrip()
		if line:
			blank_run = 0
		else:
			blank_run += 1
			if blank_run > 1:
				continue
		lines.append(line)
	return "\n".join(lines).strip()


def join_type_names(names: Sequence[str]) -> str:
	"""Enumerate type names in prose: "A", "A or B", "A, B, or C"."""
	if not names:
		return "unknown type"
	if len(names) == 1:
		return names[0]
	last_sep = " or " if len(names) == 2 else ", or "
	return ", ".join(names[:-1]) + last_sep + names[-1]


def synthesize_documentation(
	facts: Iterable[Optional[SemanticFact]],
	member_type: MemberType,
	*,
	strict: Optional[bool] = None,
) -> str:
	"""Build hover text for a member from the facts backing it.

	Instances and constants open with a one-line summary of their types in
	first-seen order. Distinct long descriptions follow, sorted so the text
	does not depend on the order facts were inferred in.
	"""
	doc_seen: Set[str] = set()
	type_seen: Set[str] = set()
	docs: List[str] = []
	types: List[str] = []

	for position, fact in enumerate(facts):
		if fact is None:
			report_missing_fact(position, strict)
			continue
		doc = fact.description or ""
		if doc not in doc_seen:
			doc_seen.add(doc)
			docs.append(doc)
		type_name = fact.short_description or ""
		if type_name not in type_seen:
			type_seen.add(type_name)
			types.append(type_name)

	parts: List[str] = []
	if member_type in (MemberType.INSTANCE, MemberType.CONSTANT):
		label = SUMMARY_LABELS.get(member_type, DEFAULT_SUMMARY_LABEL)
		parts.append(label + join_type_names(types))
		parts.append("")
	for doc in sorted(docs):
		parts.append(doc)
		parts.append("")
	return clean_documentation("\n".join(parts))


def iter_locations(
	facts: Iterable[Optional[SemanticFact]], *, strict: Optional[bool] = None
) -> Iterator[LocationInfo]:
	for position, fact in enumerate(facts):
		if fact is None:
			report_missing_fact(position, strict)
			continue
		yield from fact.locations
