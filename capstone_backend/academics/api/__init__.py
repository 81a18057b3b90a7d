"""
Master data API controllers.
"""

from capstone_backend.academics.api.academics import DepartmentConfigController
from capstone_backend.academics.api.academics import MasterDataController

__all__ = ["DepartmentConfigController", "MasterDataController"]
