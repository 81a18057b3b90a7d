"""Master data schemas for API requests and responses."""

from .academics import AcademicYearCreateSchema
from .academics import AcademicYearSchema
from .academics import DepartmentConfigResponseSchema
from .academics import DepartmentConfigSchema
from .academics import DepartmentConfigUpdateSchema
from .academics import DepartmentCreateSchema
from .academics import DepartmentSchema
from .academics import MasterDataResponseSchema
from .academics import MasterDataSchema
from .academics import SchoolCreateSchema
from .academics import SchoolSchema

__all__ = [
    "AcademicYearCreateSchema",
    "AcademicYearSchema",
    "DepartmentConfigResponseSchema",
    "DepartmentConfigSchema",
    "DepartmentConfigUpdateSchema",
    "DepartmentCreateSchema",
    "DepartmentSchema",
    "MasterDataResponseSchema",
    "MasterDataSchema",
    "SchoolCreateSchema",
    "SchoolSchema",
]
