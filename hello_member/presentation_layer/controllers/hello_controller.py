from flask import Blueprint, Response, current_app, jsonify, render_template, request

from ..output_formatter.response_models import HelloResponse

bp = Blueprint("hello", __name__)


@bp.route("/hello", methods=["GET"])
def hello():
    return render_template("hello.html", data=current_app.config["HELLO_GREETING"])


@bp.route("/hello-mvc", methods=["GET"])
def hello_mvc():
    return render_template("hello-template.html", name=request.args.get("name"))


@bp.route("/hello-string", methods=["GET"])
def hello_string():
    # request.args[...] answers 400 when the parameter is missing
    name = request.args["name"]
    return Response(f"hello {name}", mimetype="text/plain")


@bp.route("/hello-api", methods=["GET"])
def hello_api():
    hello = HelloResponse(name=request.args["name"])
    return jsonify(hello.model_dump())
