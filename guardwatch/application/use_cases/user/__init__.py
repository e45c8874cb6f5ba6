from .get_camera_location import GetCameraLocationUseCase
from .update_camera_location import UpdateCameraLocationUseCase

__all__ = [
    "GetCameraLocationUseCase",
    "UpdateCameraLocationUseCase",
]
