"""
prlabels - Custom Exceptions
"""
import structlog

logger = structlog.get_logger('exceptions')


class LabelStoreException(Exception):
    """Base exception for the label store"""
    def __init__(self, message: str, code: str = "LABEL_STORE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'error': True,
            'code': self.code,
            'message': self.message
        }


class HashingUnavailableException(LabelStoreException):
    """The label identity digest cannot be computed in this process"""
    def __init__(self, message: str):
        super().__init__(message, code="HASHING_UNAVAILABLE")
        logger.critical(f"Hashing unavailable: {message}")


class LabelConflictException(LabelStoreException):
    """Another label already owns the requested identity"""
    def __init__(self, message: str, label_id: int = None, conflicting_label_id: int = None):
        super().__init__(message, code="LABEL_CONFLICT")
        self.label_id = label_id
        self.conflicting_label_id = conflicting_label_id
        logger.warning(f"Label conflict: {message}")

    def to_dict(self):
        data = super().to_dict()
        data['label_id'] = self.label_id
        data['conflicting_label_id'] = self.conflicting_label_id
        return data

