"""RunJob command + handler — run a registered job from a scheduler or cron.

The handler runs the job with the process context. The job name is bound to
the logging context while the job runs, so every entry it logs carries it.
"""

import structlog
from protean.fields import String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.domain import ordering
from ordering.jobs.registry import create_job
from ordering.order.status import OrderStatus
from shared.context import get_context
from shared.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


@ordering.command(part_of="OrderStatus")
class RunJob:
    """Request to run a job by its registered name."""

    name = String(required=True, max_length=64)


@ordering.command_handler(part_of=OrderStatus)
class RunJobHandler:
    @handle(RunJob)
    def run_job(self, command: RunJob):
        job = create_job(get_context(), command.name)

        add_context(job=command.name, domain=current_domain.name)
        try:
            logger.info("Running job")
            job.run()
            logger.info("Job finished")
        finally:
            clear_context()
