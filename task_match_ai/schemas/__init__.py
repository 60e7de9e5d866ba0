"""Schema exports."""

from .ranked import RankedCandidate
from .task import TaskDescriptor
from .worker import CandidateWorker

__all__ = ["TaskDescriptor", "CandidateWorker", "RankedCandidate"]
