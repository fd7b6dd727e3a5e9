import logging
from typing import Dict, List

from models.candidate import Candidate


DEDUPE_POLICIES = ("first", "last", "none")


class DataValidator:
    def __init__(self):
        self.validation_stats = {
            'total_candidates': 0,
            'duplicate_candidates_removed': 0,
        }

    def remove_duplicates(self, candidates: List[Candidate], policy: str = "first") -> List[Candidate]:
        """Remove candidates sharing a canonical profile link.

        'first' keeps the earliest occurrence, 'last' keeps the latest one at
        the position of its first occurrence, 'none' keeps everything.
        """
        if policy not in DEDUPE_POLICIES:
            raise ValueError(f"Unknown dedupe policy: {policy}")
        self.validation_stats['total_candidates'] = len(candidates)
        if policy == "none":
            return list(candidates)

        chosen: Dict[str, Candidate] = {}
        for candidate in candidates:
            key = candidate.profile_url
            if key not in chosen or policy == "last":
                chosen[key] = candidate
        # dicts keep first-insertion order, so discovery order survives 'last'
        unique_candidates = list(chosen.values())

        duplicates_removed = len(candidates) - len(unique_candidates)
        self.validation_stats['duplicate_candidates_removed'] = duplicates_removed
        if duplicates_removed > 0:
            logging.info(f"Removed {duplicates_removed} duplicate candidates (policy={policy})")

        return unique_candidates

    def get_validation_stats(self) -> Dict:
        """Return validation statistics."""
        return self.validation_stats.copy()
