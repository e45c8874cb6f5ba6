"""
Users API: per-account profile settings (camera location).
"""

# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.user_dto import CameraLocationResponse, CameraLocationUpdateRequest
from ...application.use_cases.user.get_camera_location import GetCameraLocationUseCase
from ...application.use_cases.user.update_camera_location import UpdateCameraLocationUseCase
from ...di.container import get_container
from ...domain.exceptions import NotFoundError, ServiceUnavailableError, StoreError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/{user_id}/camera-location", response_model=CameraLocationResponse)
async def get_camera_location(user_id: str) -> CameraLocationResponse:
    container = get_container()
    use_case = container.get(GetCameraLocationUseCase)
    try:
        return await use_case.execute(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except StoreError as e:
        logger.error("Error getting camera location: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get camera location")


@router.patch("/{user_id}/camera-location", response_model=CameraLocationResponse)
async def update_camera_location(user_id: str, request: CameraLocationUpdateRequest) -> CameraLocationResponse:
    container = get_container()
    use_case = container.get(UpdateCameraLocationUseCase)
    try:
        return await use_case.execute(user_id, request.camera_location)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except StoreError as e:
        logger.error("Error updating camera location: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update camera location")
