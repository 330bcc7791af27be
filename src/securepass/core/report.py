# securepass/core/report.py
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable

from securepass.core.password import PasswordEntry

DISTRIBUTION_BUCKETS = (
    (80, "Very Strong (80-100)"),
    (60, "Strong (60-79)"),
    (40, "Medium (40-59)"),
    (0, "Weak (0-39)"),
)


@dataclass
class VaultStatistics:
    """Summary of the entries held by a store."""
    total: int = 0
    with_special_chars: int = 0
    average_length: float = 0.0
    distribution: Dict[str, int] = field(
        default_factory=lambda: {label: 0 for _, label in DISTRIBUTION_BUCKETS})

    @property
    def without_special_chars(self) -> int:
        return self.total - self.with_special_chars


def collect_statistics(entries: Iterable[PasswordEntry], scorer: Callable[[str], int]) -> VaultStatistics:
    stats = VaultStatistics()
    total_length = 0
    for entry in entries:
        stats.total += 1
        total_length += entry.password_length
        if entry.has_special_chars:
            stats.with_special_chars += 1
        score = scorer(entry.password)
        for threshold, label in DISTRIBUTION_BUCKETS:
            if score >= threshold:
                stats.distribution[label] += 1
                break
    if stats.total:
        stats.average_length = total_length / stats.total
    return stats
