"""Provides the canvas endpoint of the demo application."""

from flask import Blueprint, jsonify, request, Response

from .auth.decorators import authenticated

blueprint = Blueprint('canvas', __name__, url_prefix='')


@blueprint.route('/', methods=['POST'])
@authenticated
def canvas() -> Response:
    """Show who is using the canvas app, and from where."""
    context = request.canvas_context
    return jsonify(user=request.auth,
                   parameters=context.get('parameters'),
                   record=context.get('record'))
