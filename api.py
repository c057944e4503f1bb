from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from members.logging_config import logger
from members.model import Fact, MemberType, MemberView
from members.result import MemberResult


app = FastAPI(title="Member Resolver")


class ResolveRequest(BaseModel):
	name: str
	completion: Optional[str] = None
	member_type: Optional[MemberType] = None
	facts: List[Fact] = []

	def to_result(self) -> MemberResult:
		return MemberResult(
			self.name,
			self.facts,
			completion=self.completion,
			member_type=self.member_type,
		)


class BatchResolveRequest(BaseModel):
	members: List[ResolveRequest]


def resolve_views(requests: List[ResolveRequest]) -> List[MemberView]:
	# Results are keyed by name; the first request for a name wins.
	unique: Dict[MemberResult, None] = dict.fromkeys(r.to_result() for r in requests)
	if len(unique) < len(requests):
		logger.debug(f"Dropped {len(requests) - len(unique)} duplicate member name(s)")
	return [m.to_view() for m in unique]


@app.get("/health")
def health() -> Dict[str, str]:
	return {"status": "ok"}


@app.post("/resolve", response_model=MemberView)
def resolve(req: ResolveRequest) -> MemberView:
	return req.to_result().to_view()


@app.post("/resolve/batch", response_model=List[MemberView])
def resolve_batch(req: BatchResolveRequest) -> List[MemberView]:
	return resolve_views(req.members)


def create_app() -> FastAPI:
	return app
