import logging
from typing import List, Optional

from schemas.advice import SubjectAnalysis
from services.llm.base import AdvisorClient

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "AI analysis is temporarily unavailable. Please try again later."
MAX_RECOMMENDATIONS = 5


def _format_subject(s: SubjectAnalysis, status: str) -> str:
    grade = f"{s.grade:g}" if s.grade else "not graded"
    return f"- {s.name}: Grade {grade} ({s.credits:g} credits, difficulty {s.difficulty}) - {status}"


def build_prompt(average: float, subjects: List[SubjectAnalysis], target: Optional[float] = None) -> str:
    pending = [s for s in subjects if not s.completed]
    completed = [s for s in subjects if s.completed]

    all_subjects = "\n".join(
        [_format_subject(s, "COMPLETED") for s in completed]
        + [_format_subject(s, "IN PROGRESS") for s in pending]
    )

    target_line = ""
    if target is not None:
        target_line = f"\n- Target Average: {target:.2f} (difference {average - target:+.2f})"

    return (
        "Analyze academic performance and provide specific advice in English:\n\n"
        "Academic Status:\n"
        f"- Overall Average: {average:.2f}{target_line}\n"
        f"- Remaining Subjects (incomplete): {len(pending)}\n"
        f"- Completed Subjects: {len(completed)}\n\n"
        "All Subjects:\n"
        f"{all_subjects}\n\n"
        "Provide recommendations ONLY for IN PROGRESS subjects.\n\n"
        "Prioritize incomplete subjects based on:\n"
        "1. Lower grades\n"
        "2. Fewer credit points\n"
        "3. Higher difficulty\n\n"
        f"Limit to maximum {MAX_RECOMMENDATIONS} recommendations."
    )


def format_advice(text: str) -> str:
    # drop empty lines only
    return "\n".join(line for line in (text or "").strip().split("\n") if line)


async def get_advice(
    advisor: AdvisorClient,
    average: float,
    subjects: List[SubjectAnalysis],
    target: Optional[float] = None,
) -> str:
    """Ask the advisor for study advice; any failure degrades to FALLBACK_MESSAGE."""
    prompt = build_prompt(average, subjects, target)
    logger.info("Requesting study advice (average=%.2f, subjects=%d, target=%s)", average, len(subjects), target)

    try:
        advice = format_advice(await advisor.generate(prompt))
    except Exception as e:
        logger.error("Advice generation failed: %s", e)
        return FALLBACK_MESSAGE

    if not advice:
        logger.warning("Advisor returned an empty answer")
        return FALLBACK_MESSAGE
    return advice
