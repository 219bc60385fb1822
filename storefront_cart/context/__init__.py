# Request work context

from .work_context import WorkContext, WorkContextMiddleware, WorkContextDependency, work_context

__all__ = ["WorkContext", "WorkContextMiddleware", "WorkContextDependency", "work_context"]
