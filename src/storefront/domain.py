"""Storefront bounded context — HTML clients rendering shop sections and e-mails.

Clients are assembled by ``storefront.client.factory`` from configuration and
render through the templates in ``storefront.templates``. The aggregates in
``storefront.model`` hold what the account and catalog sections display.
"""

import structlog
from protean.domain import Domain

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
