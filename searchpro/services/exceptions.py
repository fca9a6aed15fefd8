"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class CacheConsistencyError(ServiceError):
    pass


class CorpusError(ServiceError):
    pass
