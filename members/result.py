from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Union

from .classify import report_missing_fact, resolve_member_type
from .docs import iter_locations, synthesize_documentation
from .model import LocationInfo, MemberType, MemberView, SemanticFact

FactSource = Callable[[], Iterable[Optional[SemanticFact]]]
FactsArg = Union[Iterable[Optional[SemanticFact]], FactSource, None]


@dataclass(frozen=True)
class Derived:
	"""Member type is resolved from the facts each time it is read."""


@dataclass(frozen=True)
class Fixed:
	member_type: MemberType


ClassificationSource = Union[Derived, Fixed]


def _empty() -> Iterable[Optional[SemanticFact]]:
	return ()


def _as_source(facts: FactsArg) -> FactSource:
	if facts is None:
		return _empty
	if callable(facts):
		return facts
	if iter(facts) is facts:
		# One-shot iterators are read once so every property sees the same facts.
		facts = tuple(facts)
	return lambda: facts


class MemberResult:
	"""A member as shown in completion lists and hover text.

	Facts are held by reference (or as a zero-argument callable re-read on
	every access) and nothing is computed until asked for; a one-shot
	iterator is read into a tuple up front. Identity is the
	name alone: results for the same name compare and hash equal whatever
	facts back them.
	"""

	__slots__ = ("_name", "_completion", "_facts", "_source")

	def __init__(
		self,
		name: str,
		facts: FactsArg = None,
		*,
		completion: Optional[str] = None,
		member_type: Optional[Union[MemberType, str]] = None,
	):
		self._name = name
		self._completion = name if completion is None else completion
		self._facts = _as_source(facts)
		self._source: ClassificationSource = (
			Derived() if member_type is None else Fixed(MemberType(member_type))
		)

	@classmethod
	def of_type(cls, name: str, member_type: Union[MemberType, str]) -> "MemberResult":
		return cls(name, member_type=member_type)

	@property
	def name(self) -> str:
		return self._name

	@property
	def key(self) -> str:
		return self._name

	@property
	def completion(self) -> str:
		return self._completion

	@property
	def source(self) -> ClassificationSource:
		return self._source

	@property
	def facts(self) -> Iterable[Optional[SemanticFact]]:
		return self._facts()

	def _snapshot(self) -> List[SemanticFact]:
		"""Read the facts once, reporting and dropping null entries."""
		facts: List[SemanticFact] = []
		for position, fact in enumerate(self.facts):
			if fact is None:
				report_missing_fact(position)
				continue
			facts.append(fact)
		return facts

	def _member_type_of(self, facts: Iterable[Optional[SemanticFact]]) -> MemberType:
		if isinstance(self._source, Fixed):
			return self._source.member_type
		return resolve_member_type(facts)

	@property
	def member_type(self) -> MemberType:
		return self._member_type_of(self.facts)

	@property
	def documentation(self) -> str:
		facts = self._snapshot()
		return synthesize_documentation(facts, self._member_type_of(facts))

	@property
	def locations(self) -> Iterator[LocationInfo]:
		return iter_locations(self.facts)

	def with_completion_text(self, completion: str) -> "MemberResult":
		"""Copy of this result that inserts ``completion`` instead."""
		clone = MemberResult(self._name, self._facts, completion=completion)
		clone._source = self._source
		return clone

	filter_completion = with_completion_text

	def to_view(self) -> MemberView:
		facts = self._snapshot()
		member_type = self._member_type_of(facts)
		return MemberView(
			name=self.name,
			completion=self.completion,
			member_type=member_type,
			documentation=synthesize_documentation(facts, member_type),
			locations=list(iter_locations(facts)),
		)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, MemberResult):
			return NotImplemented
		return self.key == other.key

	def __hash__(self) -> int:
		return hash(self.key)

	def __repr__(self) -> str:
		return f"MemberResult(name={self._name!r}, completion={self._completion!r})"
