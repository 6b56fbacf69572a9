import logging

from flask import Flask, jsonify

from .input_converter.member_params_converter import AttributeTypeError, MissingParameterError
from .output_formatter.response_models import ErrorResponse
from ..application_layer.repository_interfaces.member_repository import MemberAlreadySavedError
from ..application_layer.usecases.find_members_usecase import MemberNotFoundError
from ..application_layer.usecases.register_member_usecase import DuplicateMemberError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    MissingParameterError: 400,
    AttributeTypeError: 400,
    MemberNotFoundError: 404,
    DuplicateMemberError: 409,
    MemberAlreadySavedError: 409,
}


def register_error_handlers(app: Flask) -> None:
    for error_class, status in STATUS_BY_ERROR.items():
        app.register_error_handler(error_class, _make_handler(status))


def _make_handler(status: int):
    def handle(e: Exception):
        logger.warning(f"{type(e).__name__} answered with {status}: {e.message}")
        body = ErrorResponse(error=type(e).__name__, message=e.message)
        return jsonify(body.model_dump()), status
    return handle
