"""Components for the Agent Command Center application"""
from .dashboard import Dashboard
from .query_detail import QueryDetail
from .log_viewer import LogViewer
from .filter_manager import FilterManager

__all__ = ['Dashboard', 'QueryDetail', 'LogViewer', 'FilterManager']
