# Application layer: feature lifecycle, selection controller, state machine

from recentdirs.application.controller import ActionEvaluator, SelectionController, search_view_notice
from recentdirs.application.feature import RecentDirs
from recentdirs.application.state_machine import FeatureState

__all__ = ["ActionEvaluator", "SelectionController", "search_view_notice", "RecentDirs", "FeatureState"]
