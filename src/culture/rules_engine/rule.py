from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Type

from pydantic import BaseModel

from .context import RuleContext
from .models import RuleOutcome


class Rule(ABC):
    """A best practice for a project plus a way to check whether it is upheld.

    `description` is both the human-readable statement of the rule and its
    identity for checklist filtering, so it must be unique within a catalog.
    `evaluate` must not raise and must not mutate the context: when the answer
    cannot be determined it returns `RuleOutcome.UNDETERMINED`.
    """

    rule_id: str = ""
    description: str = ""
    config_model: Optional[Type[BaseModel]] = None

    def __init__(self):
        if not getattr(self, "description", None):
            raise ValueError("Rule must define a non-empty description")

    @abstractmethod
    def evaluate(self, ctx: RuleContext) -> RuleOutcome:  # pragma: no cover
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"
