"""Errors raised by the movie module."""

from __future__ import annotations

from typing import ClassVar

from .keys import MODULE_NAME


class ModuleError(Exception):
    """Base error; optional context is prefixed to the description."""

    codespace: ClassVar[str] = MODULE_NAME
    code: ClassVar[int] = 1
    description: ClassVar[str] = "module error"

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        if context is None:
            super().__init__()
        else:
            super().__init__(context)

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.description}"
        return self.description


class SampleError(ModuleError):
    code = 1100
    description = "sample error"


class MovieTitleAlreadyExistError(ModuleError):
    code = 1101
    description = "movie with this title is already exist"


class CannotDeletePublishedMovieError(ModuleError):
    code = 1103
    description = "can't delete published movie"


class CannotDeleteReviewedMovieError(ModuleError):
    code = 1104
    description = "can't delete reviewed movie"


class MovieDoesNotExistError(ModuleError):
    code = 1105
    description = "movie doesn't exist"


class ReviewAlreadyExistError(ModuleError):
    code = 1106
    description = "review already exist"


class InvalidValueError(ModuleError):
    code = 1107
    description = "invalid Value"


class ActionIsNotPermittedError(ModuleError):
    code = 1108
    description = "action is not permitted"


class KeyNotFoundError(ModuleError):
    codespace = "sdk"
    code = 38
    description = "key not found"


class UnauthorizedError(ModuleError):
    codespace = "sdk"
    code = 4
    description = "unauthorized"


class InvalidAddressError(ModuleError):
    codespace = "sdk"
    code = 7
    description = "invalid address"


class InvalidRequestError(ModuleError):
    codespace = "grpc"
    code = 3
    description = "invalid request"


class NotFoundError(ModuleError):
    codespace = "grpc"
    code = 5
    description = "not found"


class InternalError(ModuleError):
    codespace = "grpc"
    code = 13
    description = "internal"