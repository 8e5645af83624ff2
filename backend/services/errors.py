"""Service-level failures; the API layer maps each to an HTTP status."""


class ServiceError(Exception):
    status_code = 500


class InvalidRequestError(ServiceError):
    status_code = 400


class RecordOwnershipError(ServiceError):
    status_code = 403


class RecordNotFoundError(ServiceError):
    status_code = 404


class StreamingUnavailableError(ServiceError):
    status_code = 503
