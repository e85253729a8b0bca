"""Application tests for the job registry and the RunJob command."""

import pytest
import structlog
from ordering.jobs.base import Job
from ordering.jobs.email import DeliveryEmailJob, PaymentEmailJob
from ordering.jobs.registry import JOB_REGISTRY, create_job, get_job
from ordering.jobs.scheduling import RunJob
from ordering.order.order import PaymentStatus
from ordering.order.status import OrderStatus
from protean import current_domain
from shared.context import set_context


class TestRegistry:
    def test_known_jobs(self):
        assert set(JOB_REGISTRY) == {"order/email/payment", "order/email/delivery"}

    def test_get_job(self):
        assert get_job("order/email/delivery") is DeliveryEmailJob

    def test_unknown_job(self):
        with pytest.raises(ValueError, match="order/export/csv"):
            get_job("order/export/csv")

    def test_create_job_passes_context(self, context):
        job = create_job(context, "order/email/payment")
        assert isinstance(job, PaymentEmailJob)
        assert job.context is context


class TestRunJobCommand:
    def test_runs_job_with_process_context(self, context, mailer, place_order):
        set_context(context)
        place_order(payment_status=PaymentStatus.AUTHORIZED)

        current_domain.process(RunJob(name="order/email/payment"), asynchronous=False)

        assert len(mailer.sent_emails) == 1
        assert current_domain.repository_for(OrderStatus)._dao.query.all().total == 1

    def test_unknown_job_name(self, context):
        set_context(context)
        with pytest.raises(ValueError):
            current_domain.process(RunJob(name="order/email/unknown"), asynchronous=False)


class RecordingJob(Job):
    name = "Recording job"
    description = "Remembers the logging context it ran with"
    seen: list = []

    def run(self) -> None:
        RecordingJob.seen.append(structlog.contextvars.get_contextvars())


class FailingJob(Job):
    name = "Failing job"
    description = "Always fails"

    def run(self) -> None:
        raise RuntimeError("boom")


class TestRunJobLoggingContext:
    def test_job_name_is_bound_while_running(self, context, monkeypatch):
        set_context(context)
        monkeypatch.setitem(JOB_REGISTRY, "test/recording", RecordingJob)
        monkeypatch.setattr(RecordingJob, "seen", [])

        current_domain.process(RunJob(name="test/recording"), asynchronous=False)

        assert RecordingJob.seen == [{"job": "test/recording", "domain": current_domain.name}]
        assert structlog.contextvars.get_contextvars() == {}

    def test_context_is_cleared_after_failure(self, context, monkeypatch):
        set_context(context)
        monkeypatch.setitem(JOB_REGISTRY, "test/failing", FailingJob)

        with pytest.raises(RuntimeError):
            current_domain.process(RunJob(name="test/failing"), asynchronous=False)

        assert structlog.contextvars.get_contextvars() == {}
