"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.armory.application.character.exceptions import (
    CharacterNotFoundError,
    InvalidPrivacyFieldError,
    NoChangesProvidedError,
    NotCharacterOwnerError,
    ProfileSourceError,
)
from apps.armory.application.common.exceptions import (
    ApplicationError,
    MissingRequesterError,
    StoreFailureError,
    ValidationFailedError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(CharacterNotFoundError)
    async def character_not_found_handler(request: Request, exc: CharacterNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "CHARACTER_NOT_FOUND"},
        )

    @app.exception_handler(MissingRequesterError)
    async def missing_requester_handler(request: Request, exc: MissingRequesterError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "MISSING_REQUESTER"},
        )

    @app.exception_handler(NotCharacterOwnerError)
    async def not_character_owner_handler(request: Request, exc: NotCharacterOwnerError):
        return JSONResponse(
            status_code=403,
            content={"detail": exc.message, "code": "NOT_CHARACTER_OWNER"},
        )

    @app.exception_handler(NoChangesProvidedError)
    async def no_changes_provided_handler(request: Request, exc: NoChangesProvidedError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "NO_CHANGES_PROVIDED"},
        )

    @app.exception_handler(InvalidPrivacyFieldError)
    async def invalid_privacy_field_handler(request: Request, exc: InvalidPrivacyFieldError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "INVALID_PRIVACY_FIELD"},
        )

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "VALIDATION_FAILED"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": "Request validation failed",
                "code": "VALIDATION_FAILED",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(ProfileSourceError)
    async def profile_source_handler(request: Request, exc: ProfileSourceError):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "PROFILE_SOURCE_ERROR"},
        )

    @app.exception_handler(StoreFailureError)
    async def store_failure_handler(request: Request, exc: StoreFailureError):
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "STORE_FAILURE"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
