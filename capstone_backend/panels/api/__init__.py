"""
Panel API controllers.
"""

from capstone_backend.panels.api.panels import PanelAdminController

__all__ = ["PanelAdminController"]
