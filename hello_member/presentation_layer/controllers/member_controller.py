import logging

from flask import Blueprint, current_app, jsonify, request
from injector import Injector

from ..input_converter.member_params_converter import MemberParamsConverter
from ..output_formatter.response_models import MemberResponse, convert_members_to_json
from ...application_layer.usecases.find_members_usecase import FindMembersUseCase
from ...application_layer.usecases.register_member_usecase import RegisterMemberUseCase

logger = logging.getLogger(__name__)

bp = Blueprint("members", __name__, url_prefix="/members")


def _injector() -> Injector:
    return current_app.extensions["injector"]


@bp.route("", methods=["GET"])
def list_members():
    usecase = _injector().get(FindMembersUseCase)
    name = request.args.get("name")
    if name is not None:
        return jsonify(MemberResponse.of(usecase.find_by_name(name)).model_dump())
    return jsonify(convert_members_to_json(usecase.execute()))


@bp.route("/<int:member_id>", methods=["GET"])
def get_member(member_id: int):
    member = _injector().get(FindMembersUseCase).find_by_id(member_id)
    return jsonify(MemberResponse.of(member).model_dump())


@bp.route("", methods=["POST"])
def create_member():
    # Accept both a JSON body and a submitted form
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict() or None
    params = MemberParamsConverter.convert_json_to_params(data)
    member = _injector().get(RegisterMemberUseCase).execute(params)
    logger.info(f"Created member {member.get_id()} via HTTP")
    return jsonify(MemberResponse.of(member).model_dump()), 201
