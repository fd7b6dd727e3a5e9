from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from csv_storage import write_candidates_csv
from pipelines.runner import RunContext


class WriteCandidatesCsv:
    """Write accumulated candidates; a run with none writes nothing."""

    def __init__(self, output_path: Union[str, Path]) -> None:
        self.output_path = Path(output_path)

    def run(self, ctx: RunContext) -> RunContext:
        if not ctx.candidates:
            logging.info("No candidates found.", extra={"step": "write", "status": "empty"})
            ctx.meta["written"] = False
            return ctx
        ctx.meta["rows_written"] = write_candidates_csv(self.output_path, ctx.candidates)
        ctx.meta["written"] = True
        ctx.meta["output_path"] = str(self.output_path)
        return ctx
