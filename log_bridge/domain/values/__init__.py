from .formatted_log_values import FormattedLogValues

__all__ = ["FormattedLogValues"]
