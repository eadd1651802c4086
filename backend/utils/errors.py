# backend/utils/errors.py


class NotifierError(Exception):
    """Base class for closing-notifier failures"""
    status_code = 500
    detail = "Failed to send the closing notification."

    def __init__(self, detail: str = None, status_code: int = None):
        self.detail = detail or self.detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)


class InvalidCategoryError(NotifierError):
    """Raised when the request path is not a known closing event"""
    status_code = 400
    detail = "Invalid path specified."


class ConfigurationMissingError(NotifierError):
    """Raised when a sink has no secret configured for the active stage"""
    detail = "Notification sink is not configured."


class SlackDeliveryError(NotifierError):
    """Raised when Slack rejects the webhook or cannot be reached"""
    detail = "No response received from Slack."


class TopicPublishError(NotifierError):
    """Raised when SNS refuses the publish"""
    detail = "SNS publish failed."
