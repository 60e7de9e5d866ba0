"""
Shared test utilities.

Builders return validated schema objects so tests read like real records.
"""

from task_match_ai.schemas import CandidateWorker, TaskDescriptor


def make_task(required_skills=None, **kwargs) -> TaskDescriptor:
    return TaskDescriptor(required_skills=list(required_skills or []), **kwargs)


def make_worker(worker_id, skills=None, completed_tasks=0, rating=0.0, is_active=True, **kwargs) -> CandidateWorker:
    kwargs.setdefault("name", worker_id.title())
    kwargs.setdefault("email", f"{worker_id}@example.com")
    return CandidateWorker(
        id=worker_id,
        skills=list(skills or []),
        completed_tasks=completed_tasks,
        rating=rating,
        is_active=is_active,
        **kwargs,
    )
