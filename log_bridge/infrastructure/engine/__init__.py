from .stdlib_log import StdlibLog, SEVERITY_TO_STDLIB, SOURCE_CONTEXT_KEY

__all__ = ["StdlibLog", "SEVERITY_TO_STDLIB", "SOURCE_CONTEXT_KEY"]
