"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here.
"""

import importlib
import inspect
import logging

from django.http import Http404
from django.http import HttpRequest
from ninja.errors import ValidationError as NinjaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra import exceptions as extra_exceptions

from capstone_backend.core.api.base import BaseAPI
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema

logger = logging.getLogger(__name__)

api = NinjaExtraAPI(
    title="Capstone Review Portal API",
    version="1.0.0",
    description="Backend API for the capstone project review portal",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


def error_response(request: HttpRequest, status: int, error: ErrorSchema):
    return api.create_response(request, error.model_dump(), status=status)


@api.exception_handler(APIException)
def handle_api_exception(request: HttpRequest, exc: APIException):
    status, error = exc.to_response()
    return error_response(request, status, error)


@api.exception_handler(extra_exceptions.APIException)
def handle_framework_exception(request: HttpRequest, exc: extra_exceptions.APIException):
    """Permission and parsing errors raised by ninja-extra itself."""
    code = str(getattr(exc, "default_code", "error")).upper()
    return error_response(
        request,
        exc.status_code,
        ErrorSchema(code=code, message=str(exc.detail)),
    )


@api.exception_handler(NinjaValidationError)
def handle_validation_error(request: HttpRequest, exc: NinjaValidationError):
    return error_response(
        request,
        400,
        ErrorSchema(
            code="VALIDATION_ERROR",
            message="Invalid request data.",
            details={"errors": exc.errors},
        ),
    )


@api.exception_handler(Http404)
def handle_not_found(request: HttpRequest, exc: Http404):
    return error_response(
        request,
        404,
        ErrorSchema(code="NOT_FOUND", message=str(exc) or "Resource not found."),
    )


@api.exception_handler(Exception)
def handle_unexpected_error(request: HttpRequest, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return error_response(
        request,
        500,
        ErrorSchema(code="INTERNAL_ERROR", message="An internal error occurred."),
    )


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered.
    """
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        if exc.name != module_path:
            raise
        logger.debug("Module %s not found, skipping", module_path)
        return

    for attr_name in dir(module):
        attr = getattr(module, attr_name)
        if (
            inspect.isclass(attr)
            and issubclass(attr, BaseAPI)
            and attr is not BaseAPI
        ):
            logger.debug("Registering controller: %s.%s", module_path, attr_name)
            api_instance.register_controllers(attr)


# Register controllers from each local app
LOCAL_APPS = [
    "capstone_backend.users",
    "capstone_backend.academics",
    "capstone_backend.faculty",
    "capstone_backend.students",
    "capstone_backend.panels",
    "capstone_backend.projects",
    "capstone_backend.marks",
    "capstone_backend.faculty_requests",
    "capstone_backend.broadcasts",
    "capstone_backend.coordinators",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")
