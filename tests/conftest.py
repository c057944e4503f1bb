import os

# Silence console logging before members configures loguru on import.
os.environ.setdefault("MEMBERS__QUIET", "1")

import pytest

from members.config import get_settings
from members.logging_config import logger
from members.model import BuiltinTypeId, LocationInfo, MemberType, ValueFact


@pytest.fixture
def fact():
	"""Factory for value facts with short keyword names."""

	def make(kind=MemberType.INSTANCE, type_name=None, doc=None, type_id=BuiltinTypeId.UNKNOWN, class_type_id=None, locations=()):
		return ValueFact(
			kind=kind,
			type_id=type_id,
			class_type_id=class_type_id,
			short_description=type_name,
			description=doc,
			locations=list(locations),
		)

	return make


@pytest.fixture
def none_fact():
	return ValueFact(
		kind=MemberType.INSTANCE,
		type_id=BuiltinTypeId.NONE_TYPE,
		short_description="NoneType",
	)


@pytest.fixture
def loc():
	def make(line, column=1, file_path="mod.py"):
		return LocationInfo(file_path=file_path, line=line, column=column)

	return make


@pytest.fixture
def log_messages():
	messages = []
	handler_id = logger.add(messages.append, level="DEBUG", format="{level}:{message}")
	yield messages
	logger.remove(handler_id)


@pytest.fixture
def strict_env(monkeypatch):
	monkeypatch.setenv("MEMBERS__STRICT_FACTS", "1")
	get_settings.cache_clear()
	yield get_settings()
	monkeypatch.delenv("MEMBERS__STRICT_FACTS")
	get_settings.cache_clear()
