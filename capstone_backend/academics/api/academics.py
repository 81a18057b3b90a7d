"""
Master data and department configuration API controllers.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.academics import services
from capstone_backend.academics.models import AcademicYear
from capstone_backend.academics.models import DepartmentConfig
from capstone_backend.academics.models import School
from capstone_backend.academics.schemas import AcademicYearCreateSchema
from capstone_backend.academics.schemas import AcademicYearSchema
from capstone_backend.academics.schemas import DepartmentConfigResponseSchema
from capstone_backend.academics.schemas import DepartmentConfigSchema
from capstone_backend.academics.schemas import DepartmentConfigUpdateSchema
from capstone_backend.academics.schemas import DepartmentCreateSchema
from capstone_backend.academics.schemas import DepartmentSchema
from capstone_backend.academics.schemas import MasterDataResponseSchema
from capstone_backend.academics.schemas import MasterDataSchema
from capstone_backend.academics.schemas import SchoolCreateSchema
from capstone_backend.academics.schemas import SchoolSchema
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdmin
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.api import IsAuthenticated
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.schemas import SuccessSchema


def school_to_schema(school: School) -> SchoolSchema:
    return SchoolSchema(
        id=school.id,
        code=school.code,
        name=school.name,
        departments=[
            DepartmentSchema(id=d.id, code=d.code, name=d.name)
            for d in school.departments.all()
        ],
    )


def config_to_schema(config: DepartmentConfig) -> DepartmentConfigSchema:
    return DepartmentConfigSchema(
        id=config.id,
        academic_year=config.academic_year,
        school=config.school,
        department=config.department,
        min_panel_size=config.min_panel_size,
        max_panel_size=config.max_panel_size,
        min_team_size=config.min_team_size,
        max_team_size=config.max_team_size,
    )


@api_controller("/admin/master-data", tags=["Master data"], permissions=[IsAdmin])
class MasterDataController(BaseAPI):
    """Schools, departments and academic years."""

    @http_get(
        "",
        response={200: MasterDataResponseSchema},
        permissions=[IsAuthenticated],
        url_name="master_data",
    )
    def get_master_data(self, request: HttpRequest):
        """All schools with their departments, and all academic years."""
        schools = School.objects.prefetch_related("departments")
        return 200, MasterDataResponseSchema(
            success=True,
            data=MasterDataSchema(
                schools=[school_to_schema(s) for s in schools],
                academic_years=[
                    AcademicYearSchema(id=y.id, year=y.year, is_active=y.is_active)
                    for y in AcademicYear.objects.all()
                ],
            ),
        )

    @http_post(
        "/schools",
        response={201: SuccessSchema, 409: ErrorSchema},
        url_name="master_data_create_school",
    )
    def create_school(self, request: HttpRequest, data: SchoolCreateSchema):
        try:
            services.create_school(data.code, data.name)
        except APIException as exc:
            return exc.to_response()
        return 201, SuccessSchema(message="School created successfully.")

    @http_post(
        "/departments",
        response={201: SuccessSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="master_data_create_department",
    )
    def create_department(self, request: HttpRequest, data: DepartmentCreateSchema):
        try:
            services.create_department(data.school, data.code, data.name)
        except APIException as exc:
            return exc.to_response()
        return 201, SuccessSchema(message="Department created successfully.")

    @http_post(
        "/academic-years",
        response={201: SuccessSchema, 409: ErrorSchema},
        url_name="master_data_create_academic_year",
    )
    def create_academic_year(self, request: HttpRequest, data: AcademicYearCreateSchema):
        try:
            services.create_academic_year(data.year, data.is_active)
        except APIException as exc:
            return exc.to_response()
        return 201, SuccessSchema(message="Academic year created successfully.")


@api_controller("/admin/department-config", tags=["Master data"], permissions=[IsAdmin])
class DepartmentConfigController(BaseAPI):
    """Panel and team size limits per scope."""

    @http_get(
        "",
        response={200: DepartmentConfigResponseSchema, 404: ErrorSchema},
        permissions=[IsAdminOrCoordinator],
        url_name="department_config_get",
    )
    def get_config(self, request: HttpRequest, academic_year: str, school: str, department: str):
        try:
            config = services.get_department_config(academic_year, school, department)
        except APIException as exc:
            return exc.to_response()
        return 200, DepartmentConfigResponseSchema(success=True, data=config_to_schema(config))

    @http_put(
        "",
        response={200: DepartmentConfigResponseSchema, 400: ErrorSchema},
        url_name="department_config_update",
    )
    def update_config(self, request: HttpRequest, data: DepartmentConfigUpdateSchema):
        try:
            config = services.upsert_department_config(
                data.academic_year,
                data.school,
                data.department,
                min_panel_size=data.min_panel_size,
                max_panel_size=data.max_panel_size,
                min_team_size=data.min_team_size,
                max_team_size=data.max_team_size,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, DepartmentConfigResponseSchema(
            success=True,
            message="Department configuration saved.",
            data=config_to_schema(config),
        )
