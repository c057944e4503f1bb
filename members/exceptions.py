# Custom exceptions for the member resolver

class MembersError(Exception):
	"""Base exception for all resolver errors."""
	pass


class FactContractError(MembersError):
	"""Raised in strict mode when a fact collection holds a null entry."""

	def __init__(self, index: int, message: str = "fact entry is None"):
		self.index = index
		self.message = message
		super().__init__(f"Invalid fact at position {index}: {message}")
