"""
CSV output for scraped candidates.
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from models.candidate import Candidate
from services.errors import OutputWriteError


CSV_HEADER = ["Name", "Email", "Phone", "Profile URL", "Experience"]


def candidate_to_row(candidate: Candidate) -> List[str]:
    return [
        candidate.name,
        candidate.email,
        candidate.phone,
        candidate.profile_url,
        str(candidate.experience_years),
    ]


def row_to_candidate(row: dict) -> Candidate:
    return Candidate(
        name=row.get("Name") or "",
        email=row.get("Email") or "",
        phone=row.get("Phone") or "",
        profile_url=row.get("Profile URL") or "",
        experience_years=int(row.get("Experience") or 0),
    )


def write_candidates_csv(path: Union[str, Path], candidates: Iterable[Candidate]) -> int:
    """Overwrite ``path`` with a header row plus one row per candidate.

    Returns the number of data rows written.
    """
    output_path = Path(path)
    written = 0
    try:
        with output_path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for candidate in candidates:
                writer.writerow(candidate_to_row(candidate))
                written += 1
    except (OSError, csv.Error) as e:
        raise OutputWriteError(str(output_path), str(e)) from e
    logging.info(f"Wrote {written} candidates to {output_path}", extra={"step": "write", "status": "ok"})
    return written


def read_candidates_csv(path: Union[str, Path]) -> List[Candidate]:
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        return [row_to_candidate(row) for row in csv.DictReader(f)]
