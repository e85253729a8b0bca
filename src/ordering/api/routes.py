"""FastAPI routes for the Ordering domain — provider callbacks and jobs."""

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import JobResponse, RunJobRequest, StatusResponse, StatusUpdateRequest
from ordering.jobs.registry import JOB_REGISTRY
from ordering.jobs.scheduling import RunJob
from ordering.order.payment import UpdateDeliveryStatus, UpdatePaymentStatus

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _process_status_update(command) -> StatusResponse:
    try:
        current_domain.process(command, asynchronous=False)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Order {command.order_id} not found") from None
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from None
    return StatusResponse()


@order_router.post("/{order_id}/payment-status", response_model=StatusResponse)
async def update_payment_status(order_id: str, body: StatusUpdateRequest) -> StatusResponse:
    return _process_status_update(UpdatePaymentStatus(order_id=order_id, status=body.status))


@order_router.post("/{order_id}/delivery-status", response_model=StatusResponse)
async def update_delivery_status(order_id: str, body: StatusUpdateRequest) -> StatusResponse:
    return _process_status_update(UpdateDeliveryStatus(order_id=order_id, status=body.status))


# ---------------------------------------------------------------------------
# Job Router
# ---------------------------------------------------------------------------
job_router = APIRouter(prefix="/jobs", tags=["jobs"])


@job_router.get("")
async def list_jobs() -> dict:
    return {"jobs": sorted(JOB_REGISTRY)}


@job_router.post("/run", response_model=JobResponse)
async def run_job(body: RunJobRequest) -> JobResponse:
    if body.name not in JOB_REGISTRY:
        raise HTTPException(status_code=404, detail=f"Unknown job: {body.name}")

    current_domain.process(RunJob(name=body.name), asynchronous=False)
    return JobResponse(name=body.name)
