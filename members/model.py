from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Protocol, Sequence, Union, runtime_checkable

from pydantic import BaseModel, Discriminator, Tag


class MemberType(str, Enum):
	UNKNOWN = "unknown"
	CLASS = "class"
	INSTANCE = "instance"
	DELEGATE = "delegate"
	DELEGATE_INSTANCE = "delegate_instance"
	ENUM = "enum"
	ENUM_INSTANCE = "enum_instance"
	FUNCTION = "function"
	METHOD = "method"
	MODULE = "module"
	NAMESPACE = "namespace"
	CONSTANT = "constant"
	EVENT = "event"
	FIELD = "field"
	PROPERTY = "property"
	MULTIPLE = "multiple"
	KEYWORD = "keyword"
	CODE_SNIPPET = "code_snippet"
	NAMED_ARGUMENT = "named_argument"


class BuiltinTypeId(str, Enum):
	"""Interpreter built-in types an inference engine can tag a fact with."""

	UNKNOWN = "unknown"
	NONE_TYPE = "NoneType"
	OBJECT = "object"
	TYPE = "type"
	FUNCTION = "function"
	BUILTIN_FUNCTION = "builtin_function"
	BUILTIN_METHOD = "builtin_method"
	MODULE = "module"
	BOOL = "bool"
	INT = "int"
	FLOAT = "float"
	COMPLEX = "complex"
	STR = "str"
	BYTES = "bytes"
	LIST = "list"
	TUPLE = "tuple"
	DICT = "dict"
	SET = "set"
	FROZENSET = "frozenset"
	GENERATOR = "generator"
	ELLIPSIS = "ellipsis"


class LocationInfo(BaseModel):
	file_path: str
	line: int
	column: int
	end_line: Optional[int] = None
	end_column: Optional[int] = None


@runtime_checkable
class SemanticFact(Protocol):
	"""Capabilities the resolver needs from one inferred binding.

	Facts come from an external inference engine; anything exposing these
	members can be passed to the classifier and documentation functions.
	"""

	kind: MemberType
	short_description: Optional[str]
	description: Optional[str]
	locations: Sequence[LocationInfo]

	def is_none(self) -> bool: ...

	def is_builtin_function_constant(self) -> bool: ...

	def is_builtin_type_constant(self) -> bool: ...


class ValueFact(BaseModel):
	fact: Literal["value"] = "value"
	kind: MemberType = MemberType.UNKNOWN
	type_id: BuiltinTypeId = BuiltinTypeId.UNKNOWN
	# For constants: the built-in class the constant value belongs to.
	class_type_id: Optional[BuiltinTypeId] = None
	short_description: Optional[str] = None
	description: Optional[str] = None
	locations: List[LocationInfo] = []

	def is_none(self) -> bool:
		return self.type_id == BuiltinTypeId.NONE_TYPE

	def is_builtin_function_constant(self) -> bool:
		return self.kind == MemberType.CONSTANT and self.class_type_id == BuiltinTypeId.FUNCTION

	def is_builtin_type_constant(self) -> bool:
		return self.kind == MemberType.CONSTANT and self.class_type_id == BuiltinTypeId.TYPE


def _distinct(values: Sequence[Optional[str]]) -> List[str]:
	seen: List[str] = []
	for v in values:
		if v and v not in seen:
			seen.append(v)
	return seen


class FactGroup(BaseModel):
	"""Several facts fused into one unit by the inference engine.

	Members are plain value facts, so a group is only ever one level deep.
	"""

	fact: Literal["group"] = "group"
	members: List[ValueFact] = []

	@property
	def kind(self) -> MemberType:
		return MemberType.MULTIPLE

	@property
	def short_description(self) -> Optional[str]:
		names = _distinct([m.short_description for m in self.members])
		return ", ".join(names) or None

	@property
	def description(self) -> Optional[str]:
		docs = _distinct([m.description for m in self.members])
		return "\n\n".join(docs) or None

	@property
	def locations(self) -> List[LocationInfo]:
		return [loc for m in self.members for loc in m.locations]

	def is_none(self) -> bool:
		return False

	def is_builtin_function_constant(self) -> bool:
		return False

	def is_builtin_type_constant(self) -> bool:
		return False


def _fact_tag(value: object) -> str:
	if isinstance(value, dict):
		return value.get("fact") or ("group" if "members" in value else "value")
	return getattr(value, "fact", "value")


Fact = Annotated[
	Union[Annotated[ValueFact, Tag("value")], Annotated[FactGroup, Tag("group")]],
	Discriminator(_fact_tag),
]


class MemberView(BaseModel):
	name: str
	completion: str
	member_type: MemberType
	documentation: str = ""
	locations: List[LocationInfo] = []
