from fastapi import HTTPException

from devevents.services.exceptions import NotFoundError, ServiceError


def http_error_from_service(err: ServiceError) -> HTTPException:
    if isinstance(err, NotFoundError):
        status = 404
    else:
        status = 500

    return HTTPException(
        status_code=status,
        detail={"code": err.code, "message": err.message},
    )
