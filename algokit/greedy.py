"""Greedy algorithms: fractional knapsack and job sequencing with deadlines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if finished by slot ``deadline``."""

    id: int
    deadline: int
    profit: int


@dataclass(frozen=True)
class Schedule:
    """Jobs chosen by :func:`schedule_jobs`, listed by slot, with their total profit."""

    job_ids: tuple[int, ...]
    total_profit: int


def fractional_knapsack(
    capacity: float,
    weights: Iterable[float],
    values: Iterable[float],
) -> float:
    """Maximum value that fits in ``capacity`` when items may be split.

    Items are taken whole in descending value-to-weight order; the first one
    that does not fit is taken in part and the knapsack is then full.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")

    items = sorted(
        zip(weights, values), key=lambda item: item[1] / item[0], reverse=True
    )
    remaining = capacity
    total = 0.0
    for weight, value in items:
        if remaining >= weight:
            remaining -= weight
            total += value
        else:
            total += value / weight * remaining
            break
    return total


def schedule_jobs(jobs: Iterable[Job | tuple[int, int, int]]) -> Schedule:
    """Pick jobs by descending profit, each in the latest free slot up to its deadline."""
    normalised = [job if isinstance(job, Job) else Job(*job) for job in jobs]
    ordered = sorted(normalised, key=lambda job: job.profit, reverse=True)
    max_deadline = max((job.deadline for job in ordered), default=0)

    slots: dict[int, Job] = {}
    for job in ordered:
        free = next(
            (
                slot
                for slot in range(min(job.deadline, max_deadline), 0, -1)
                if slot not in slots
            ),
            None,
        )
        if free is not None:
            slots[free] = job

    chosen = [slots[slot] for slot in sorted(slots)]
    return Schedule(
        job_ids=tuple(job.id for job in chosen),
        total_profit=sum(job.profit for job in chosen),
    )