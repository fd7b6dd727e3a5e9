from __future__ import annotations

from data_validator import DataValidator
from pipelines.runner import RunContext


class DedupeCandidates:
    def __init__(self, policy: str = "first") -> None:
        self.policy = policy
        self.validator = DataValidator()

    def run(self, ctx: RunContext) -> RunContext:
        ctx.candidates = self.validator.remove_duplicates(ctx.candidates, self.policy)
        ctx.meta["validation_stats"] = self.validator.get_validation_stats()
        return ctx
