"""Project schemas for API requests and responses."""

from .projects import BestProjectResponseSchema
from .projects import BestProjectSchema
from .projects import GuideProjectsResponseSchema
from .projects import GuideProjectsSchema
from .projects import PanelProjectsResponseSchema
from .projects import PanelProjectsSchema
from .projects import ProjectCreateSchema
from .projects import ProjectListResponseSchema
from .projects import ProjectPanelSchema
from .projects import ProjectResponseSchema
from .projects import ProjectSchema
from .projects import ReassignGuideSchema

__all__ = [
    "BestProjectResponseSchema",
    "BestProjectSchema",
    "GuideProjectsResponseSchema",
    "GuideProjectsSchema",
    "PanelProjectsResponseSchema",
    "PanelProjectsSchema",
    "ProjectCreateSchema",
    "ProjectListResponseSchema",
    "ProjectPanelSchema",
    "ProjectResponseSchema",
    "ProjectSchema",
    "ReassignGuideSchema",
]
