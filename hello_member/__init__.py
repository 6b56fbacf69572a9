import logging

from flask import Flask
from injector import Injector

from .config import Config
from .container import create_injector

logger = logging.getLogger(__name__)


def create_app(test_config=None, injector: Injector = None):
    # appの設定
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("HELLO_MEMBER")
    if test_config is not None:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(app.config["LOG_LEVEL"])

    app.extensions["injector"] = injector if injector is not None else create_injector()

    from .presentation_layer.controllers import hello_controller, member_controller
    from .presentation_layer.error_handlers import register_error_handlers

    app.register_blueprint(hello_controller.bp)
    app.register_blueprint(member_controller.bp)
    register_error_handlers(app)

    if app.config["MEMBER_SEED_FILE"]:
        _seed_members(app)

    return app


def _seed_members(app: Flask) -> None:
    from .application_layer.usecases.register_member_usecase import DuplicateMemberError, RegisterMemberUseCase
    from .presentation_layer.input_converter.member_seed_loader import MemberSeedError, MemberSeedLoader

    usecase = app.extensions["injector"].get(RegisterMemberUseCase)
    for params in MemberSeedLoader(app.config["MEMBER_SEED_FILE"]).load():
        try:
            usecase.execute(params)
        except DuplicateMemberError as e:
            raise MemberSeedError(f"Cannot seed {app.config['MEMBER_SEED_FILE']}: {e.message}") from e
    logger.info(f"Seeded members from {app.config['MEMBER_SEED_FILE']}")
