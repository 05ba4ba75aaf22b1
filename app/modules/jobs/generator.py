"""Random job postings used to (re)populate the demo catalog."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import Job, JobType

TITLES = (
    "Software Engineer",
    "Product Manager",
    "UX Designer",
    "Data Scientist",
    "DevOps Specialist",
    "Frontend Developer",
    "Backend Developer",
    "Fullstack Engineer",
    "Mobile App Developer",
    "QA Tester",
    "Technical Writer",
    "Scrum Master",
    "Solutions Architect",
    "Cloud Engineer",
    "Security Analyst",
)

DESCRIPTIONS = (
    "to work on exciting new projects.",
    "to join a dynamic team.",
    "to help build innovative solutions.",
    "with experience in agile methodologies.",
    "passionate about technology.",
    "skilled in modern frameworks.",
    "to contribute to a fast-paced environment.",
    "with a strong portfolio.",
    "to lead and mentor junior developers.",
    "focused on delivering high-quality code.",
)

# reward = randrange(50, 550) * 10, i.e. a multiple of 10 in [500, 5490]
REWARD_UNITS = (50, 550)
REWARD_STEP = 10


def random_reward(rng: random.Random) -> int:
    return rng.randrange(*REWARD_UNITS) * REWARD_STEP


def generate_jobs(
    count: int,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> list[Job]:
    """Build ``count`` postings with ids ``job1`` .. ``job{count}``.

    Creation timestamps grow with the index so ``job{count}`` is the newest
    posting and the catalog order is stable.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    rng = rng or random.Random()
    base = (now or datetime.now(timezone.utc)) - timedelta(milliseconds=count)
    job_types = list(JobType)

    jobs = []
    for index in range(1, count + 1):
        jobs.append(
            Job(
                id=f"job{index}",
                title=f"{rng.choice(TITLES)} #{index}",
                description=f"Seeking a {rng.choice(TITLES)} {rng.choice(DESCRIPTIONS)}",
                type=rng.choice(job_types),
                reward=random_reward(rng),
                created_at=base + timedelta(milliseconds=index),
            )
        )
    return jobs
