"""Job registry — maps job names to job classes."""

from ordering.jobs.base import Job
from ordering.jobs.email import DeliveryEmailJob, PaymentEmailJob
from shared.context import Context

JOB_REGISTRY: dict[str, type] = {
    "order/email/payment": PaymentEmailJob,
    "order/email/delivery": DeliveryEmailJob,
}


def get_job(name: str) -> type:
    """Look up a job class by name."""
    job_cls = JOB_REGISTRY.get(name)
    if job_cls is None:
        raise ValueError(f"No job registered with name: {name}")
    return job_cls


def create_job(context: Context, name: str) -> Job:
    return get_job(name)(context)
