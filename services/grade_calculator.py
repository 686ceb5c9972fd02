"""
services/grade_calculator.py

Pure grade math for one user's study cycle. Nothing here touches the
database or the network; callers load subjects and entries, call these
functions, and persist whatever changed.

- compute_stats: weighted averages and credit counts
- set_grade / set_completed: validated updates of the entry mapping
- build_analysis / recommendation_candidates: input for the study advisor
- compare_to_target: auto average vs a custom or historical target
"""

import math
import re
from typing import Iterable, List, Optional

from schemas.advice import SubjectAnalysis
from schemas.grades import AverageStats, GradeEntries, GradeEntry, TargetComparison
from schemas.subjects import Subject

GRADE_MIN = 0.0
GRADE_MAX = 10.0

# plain decimal text, as a number field would send it
GRADE_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

# hard subjects first when grades and credits tie
DIFFICULTY_PRIORITY = {"hard": 0, "medium": 1, "easy": 2}


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_stats(subjects: Iterable[Subject], entries: GradeEntries, total_credits: float = 60) -> AverageStats:
    """Fold subjects and grade entries into an AverageStats record."""
    weighted_sum = 0.0
    credits_attempted = 0.0
    completed_credits = 0.0
    total_possible_credits = 0.0
    auto_weighted_sum = 0.0
    auto_total_credits = 0.0

    for subject in subjects:
        total_possible_credits += subject.credits
        credits_attempted += subject.credits

        entry = entries.get(subject.id)
        if entry is None:
            continue

        if entry.grade > 0:
            auto_weighted_sum += entry.grade * subject.credits
            auto_total_credits += subject.credits

        if entry.completed:
            weighted_sum += entry.grade * subject.credits
            completed_credits += subject.credits

    return AverageStats(
        current_average=_ratio(weighted_sum, credits_attempted),
        auto_average=_ratio(auto_weighted_sum, auto_total_credits),
        projected_average=_ratio(weighted_sum, total_credits),
        completed_credits=completed_credits,
        remaining_credits=total_credits - completed_credits,
        total_possible_credits=total_possible_credits,
    )


def parse_grade(raw_value: str) -> Optional[float]:
    """Return the grade as a float, or None when the text is not a grade in [0, 10]."""
    text = (raw_value or "").strip()
    if not GRADE_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value) or value < GRADE_MIN or value > GRADE_MAX:
        return None
    return value


def set_grade(entries: GradeEntries, subject_id: int, raw_value: str) -> GradeEntries:
    """
    Apply a raw grade field value to the entry of one subject.

    "" clears the entry (grade 0, not completed). Invalid or out of range
    text leaves the mapping untouched and the same object is returned.
    """
    if not raw_value:
        return {**entries, subject_id: GradeEntry(grade=0.0, completed=False)}

    value = parse_grade(raw_value)
    if value is None:
        return entries

    previous = entries.get(subject_id)
    completed = previous.completed if previous is not None else False
    return {**entries, subject_id: GradeEntry(grade=value, completed=completed)}


def set_completed(entries: GradeEntries, subject_id: int, completed: bool) -> GradeEntries:
    # a subject may be completed with grade 0; it then counts as a 0 in current_average
    previous = entries.get(subject_id)
    grade = previous.grade if previous is not None else 0.0
    return {**entries, subject_id: GradeEntry(grade=grade, completed=completed)}


def default_difficulty(credits: float) -> str:
    if credits <= 4:
        return "easy"
    if credits <= 8:
        return "medium"
    return "hard"


def build_analysis(subjects: Iterable[Subject], entries: GradeEntries) -> List[SubjectAnalysis]:
    analysis = []
    for subject in subjects:
        entry = entries.get(subject.id)
        analysis.append(
            SubjectAnalysis(
                name=subject.subject_name,
                credits=subject.credits,
                difficulty=subject.difficulty or "medium",
                grade=entry.grade if entry is not None else 0.0,
                completed=entry.completed if entry is not None else False,
            )
        )
    return analysis


def recommendation_candidates(subjects: Iterable[Subject], entries: GradeEntries) -> List[SubjectAnalysis]:
    """Subjects still in progress, lowest grade first, then fewest credits, then hardest."""
    pending = [a for a in build_analysis(subjects, entries) if not a.completed]
    return sorted(
        pending,
        key=lambda a: (a.grade, a.credits, DIFFICULTY_PRIORITY.get(a.difficulty, 1), a.name),
    )


def compare_to_target(auto_average: float, target: Optional[float]) -> TargetComparison:
    if target is None:
        return TargetComparison(auto_average=auto_average)
    delta = auto_average - target
    return TargetComparison(auto_average=auto_average, target=target, delta=delta, reached=delta >= 0)
