"""Tests for the job catalog and its reseed."""

import random

import pytest

from app.modules.applications.service import ApplicationService
from app.modules.jobs import JobFilter, JobType
from app.modules.jobs.generator import DESCRIPTIONS, TITLES, generate_jobs
from app.modules.jobs.service import JobCatalogService


@pytest.fixture
def service(session):
    return JobCatalogService.with_session(session, rng=random.Random(7))


class TestGenerator:
    def test_ids_titles_and_rewards(self):
        jobs = generate_jobs(100, rng=random.Random(1))

        assert [job.id for job in jobs] == [f"job{i}" for i in range(1, 101)]
        for index, job in enumerate(jobs, start=1):
            assert job.title.endswith(f" #{index}")
            assert job.title.rsplit(" #", 1)[0] in TITLES
            assert job.description.startswith("Seeking a ")
            assert any(job.description.endswith(phrase) for phrase in DESCRIPTIONS)
            assert job.type in (JobType.STABLE, JobType.FREELANCE)
            assert job.reward % 10 == 0
            assert 500 <= job.reward <= 5490

    def test_timestamps_increase_with_index(self):
        jobs = generate_jobs(5, rng=random.Random(2))
        stamps = [job.created_at for job in jobs]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == 5

    def test_same_seed_same_catalog(self):
        first = [(job.title, job.type, job.reward) for job in generate_jobs(20, rng=random.Random(3))]
        second = [(job.title, job.type, job.reward) for job in generate_jobs(20, rng=random.Random(3))]
        assert first == second

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            generate_jobs(0)


class TestListJobs:
    async def test_newest_first_and_filtered(self, service, make_job):
        await make_job("job-a", JobType.STABLE)
        await make_job("job-b", JobType.FREELANCE)
        await make_job("job-c", JobType.STABLE)

        assert [job.id for job in await service.list_jobs()] == ["job-c", "job-b", "job-a"]
        assert [job.id for job in await service.list_jobs(JobFilter.STABLE)] == ["job-c", "job-a"]
        assert [job.id for job in await service.list_jobs("FREELANCE")] == ["job-b"]

    async def test_unknown_filter(self, service):
        with pytest.raises(ValueError):
            await service.list_jobs("PART_TIME")

    async def test_get_job(self, service, make_job):
        await make_job("job-a", JobType.FREELANCE, reward=700)

        job = await service.get_job("job-a")

        assert job is not None
        assert job.type is JobType.FREELANCE
        assert job.reward == 700
        assert await service.get_job("missing") is None


class TestReseed:
    async def test_default_reseed_replaces_catalog(self, service, make_job):
        await make_job("legacy-job", JobType.STABLE)

        jobs = await service.reseed()

        assert len(jobs) == 100
        assert jobs[0].id == "job100"
        assert jobs[-1].id == "job1"
        listed = await service.list_jobs(JobFilter.ALL)
        assert {job.id for job in listed} == {f"job{i}" for i in range(1, 101)}
        assert await service.get_job("legacy-job") is None

    async def test_reseed_clears_applications(
        self, session, service, make_account, make_job, count_applications
    ):
        account_id = await make_account()
        await make_job("job1", JobType.FREELANCE)
        await make_job("old-job", JobType.STABLE)
        applications = ApplicationService.with_session(session, stable_cost=5)
        await applications.apply(account_id, "job1")
        await applications.apply(account_id, "old-job")
        assert await count_applications(account_id) == 2

        jobs = await service.reseed(10)

        assert len(jobs) == 10
        assert await count_applications() == 0

    async def test_reseed_keeps_balances(self, session, service, make_account, make_job, read_balance):
        account_id = await make_account(balance=1000)
        await make_job("job1", JobType.STABLE)
        await ApplicationService.with_session(session, stable_cost=5).apply(account_id, "job1")

        await service.reseed(3)

        assert await read_balance(account_id) == 995

    async def test_can_apply_after_reseed(self, session, service, make_account):
        account_id = await make_account(balance=1000)
        jobs = await service.reseed(4)

        result = await ApplicationService.with_session(session, stable_cost=5).apply(account_id, jobs[0].id)

        assert result.success is True
        expected = 995 if jobs[0].type is JobType.STABLE else 1000
        assert result.balance_after == expected
