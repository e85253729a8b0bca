"""Ordering bounded context — orders, order details and notification status records.

Orders are created at checkout and their payment/delivery status is updated by
provider callbacks. Scheduled jobs in ``ordering.jobs`` send status e-mails and
record which notifications went out.
"""

import logging

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)
