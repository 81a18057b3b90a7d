"""Panel schemas for API requests and responses."""

from .panels import AutoAssignSchema
from .panels import AutoCreateSchema
from .panels import PanelAssignResponseSchema
from .panels import PanelAssignSchema
from .panels import PanelAssignmentSchema
from .panels import PanelCreateSchema
from .panels import PanelListResponseSchema
from .panels import PanelMemberSchema
from .panels import PanelMembersUpdateSchema
from .panels import PanelResponseSchema
from .panels import PanelSchema
from .panels import PanelUpdateSchema
from .panels import TaskQueuedSchema

__all__ = [
    "AutoAssignSchema",
    "AutoCreateSchema",
    "PanelAssignResponseSchema",
    "PanelAssignSchema",
    "PanelAssignmentSchema",
    "PanelCreateSchema",
    "PanelListResponseSchema",
    "PanelMemberSchema",
    "PanelMembersUpdateSchema",
    "PanelResponseSchema",
    "PanelSchema",
    "PanelUpdateSchema",
    "TaskQueuedSchema",
]
