import logging

from fastapi import APIRouter, Depends, HTTPException

from gh_host import dependencies as deps
from gh_host.exceptions import DispatchError
from gh_host.schemas.dispatch import DispatchRequest, DispatchResponse
from gh_host.security import verify_secret
from gh_host.services.dispatch_service import DispatchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dispatch-workflow", response_model=DispatchResponse)
def dispatch_workflow(
    request: DispatchRequest = Depends(verify_secret),
    service: DispatchService = Depends(deps.get_dispatch_service),
):
    """Trigger the GitHub workflow named in the request."""
    try:
        service.dispatch(request)
    except DispatchError as e:
        raise HTTPException(
            status_code=500, detail=f"Failed to dispatch workflow: {e.body}"
        )
    except Exception as e:
        logger.error(f"Unexpected error dispatching {request.workflow}: {e}")
        raise HTTPException(status_code=500, detail="Error sending request to GitHub API")
    return DispatchResponse(message="Workflow triggered successfully!")
