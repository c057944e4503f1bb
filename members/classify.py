from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .config import get_settings
from .exceptions import FactContractError
from .logging_config import logger
from .model import FactGroup, MemberType, SemanticFact

# A constant also seen as an instance is an instance, whichever comes first.
_PROMOTES_TO_INSTANCE = {MemberType.CONSTANT, MemberType.INSTANCE}


def flatten_facts(facts: Iterable[Optional[SemanticFact]]) -> Iterator[Optional[SemanticFact]]:
	"""Expand fused groups one level; other facts pass through unchanged."""
	for fact in facts:
		if isinstance(fact, FactGroup):
			yield from fact.members
		else:
			yield fact


def report_missing_fact(position: int, strict: Optional[bool] = None) -> None:
	"""Flag a null fact handed over by the inference engine.

	Strict mode raises; otherwise the entry is logged and the caller skips it.
	"""
	if strict is None:
		strict = get_settings().strict_facts
	if strict:
		raise FactContractError(position)
	logger.error(f"Unexpected None fact at position {position}; skipping")


def effective_kind(fact: SemanticFact) -> MemberType:
	# Constants holding the function or type objects themselves.
	if fact.is_builtin_function_constant():
		return MemberType.FUNCTION
	if fact.is_builtin_type_constant():
		return MemberType.CLASS
	return fact.kind


def resolve_member_type(
	facts: Iterable[Optional[SemanticFact]], *, strict: Optional[bool] = None
) -> MemberType:
	"""Merge the kinds of all facts into one member type.

	Identical kinds merge, constant and instance merge to INSTANCE, and any
	other disagreement yields MULTIPLE. None-typed and UNKNOWN facts carry no
	signal; a symbol seen only as None is a CONSTANT and one with no signal at
	all is an INSTANCE, so UNKNOWN is never returned.
	"""
	includes_none = False
	result = MemberType.UNKNOWN

	for position, fact in enumerate(flatten_facts(facts)):
		if fact is None:
			report_missing_fact(position, strict)
			continue

		kind = effective_kind(fact)

		if fact.is_none():
			includes_none = True
		elif kind == MemberType.UNKNOWN or result == kind:
			pass
		elif result == MemberType.UNKNOWN:
			result = kind
		elif {result, kind} == _PROMOTES_TO_INSTANCE:
			result = MemberType.INSTANCE
		else:
			logger.debug(f"Conflicting kinds {result.value} and {kind.value}; resolving to multiple")
			return MemberType.MULTIPLE

	if result == MemberType.UNKNOWN:
		return MemberType.CONSTANT if includes_none else MemberType.INSTANCE
	return result
