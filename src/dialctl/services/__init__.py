"""Service layer — simulation runs over the dial domain.

All service methods return :class:`~dialctl.services.result.ServiceResult`.
"""
