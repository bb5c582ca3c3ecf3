# routes/user.py
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from controllers.user_controller import create_user, get_user, UserRequestError

bp = Blueprint('user', __name__, url_prefix="/api/user")


def _error(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def _read_image():
    """
    Upload boundary: returns the image bytes (or None when no file was sent).
    Rejects non-image content types and oversized files before the
    controller sees anything.
    """
    file = request.files.get("image")
    if file is None or not file.filename:
        return None

    if not (file.mimetype or "").startswith("image/"):
        raise UserRequestError("Only images are allowed", status_code=415)

    data = file.read(current_app.config["MAX_IMAGE_SIZE"] + 1)
    if len(data) > current_app.config["MAX_IMAGE_SIZE"]:
        raise UserRequestError("File too large", status_code=413)
    return data


def _form_fields() -> dict:
    """
    Every submitted form field. A repeated key keeps all of its values as a
    list; a key sent once stays a plain string.
    """
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in request.form.to_dict(flat=False).items()
    }


@bp.route("/create", methods=["POST"])
def create():
    try:
        image = _read_image()
        user = create_user(_form_fields(), image)
    except UserRequestError as e:
        return _error(e.message, e.status_code)
    except HTTPException:
        # e.g. body over MAX_CONTENT_LENGTH; rendered by the app error handlers
        raise
    except Exception:
        current_app.logger.exception("Error creating user")
        return _error("Internal server error", 500)

    return jsonify({
        "success": True,
        "message": "User created successfully",
        "user": user,
    }), 201


@bp.route("/<cnic>", methods=["GET"])
def fetch(cnic):
    try:
        user = get_user(cnic)
    except UserRequestError as e:
        return _error(e.message, e.status_code)
    except Exception:
        current_app.logger.exception("Error fetching user")
        return _error("Internal server error", 500)

    return jsonify({"success": True, "user": user})
