"""
Registration routes: landing page form post + JSON API.
"""
import logging

from flask import Blueprint, current_app, jsonify, redirect, request, session, url_for

from mastermind.extensions import get_record_store
from mastermind.routes.main import FORM_SESSION_KEY
from mastermind.services.notifications import NORMAL, FlashNotifier, NotificationLog
from mastermind.services.registration import (
    FIELDS,
    RegistrationController,
    RegistrationFormState,
)

registration_bp = Blueprint("registration", __name__)
logger = logging.getLogger(__name__)


def _build_controller(notifier, state=None) -> RegistrationController:
    return RegistrationController(
        store=get_record_store(),
        notifier=notifier,
        table=current_app.config["REGISTRATION_TABLE"],
        state=state,
    )


def _apply_fields(controller: RegistrationController, data) -> None:
    """Forward the posted values into the form state untouched."""
    for field_name in FIELDS:
        controller.update_field(field_name, data.get(field_name, ""))


@registration_bp.post("/register")
def register():
    """Handle the landing page form and redirect back to it."""
    state = RegistrationFormState.from_dict(session.get(FORM_SESSION_KEY))
    controller = _build_controller(FlashNotifier(), state)
    _apply_fields(controller, request.form)

    notification = controller.submit()
    session[FORM_SESSION_KEY] = controller.state.to_dict()

    logger.info("register variant=%s", notification.variant if notification else None)
    return redirect(url_for("main.home") + "#register")


@registration_bp.post("/api/registrations")
def register_api():
    """
    JSON API endpoint for registration.
    Expects: {name, email}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Expected a JSON object with name and email"}), 400

    bad = [f for f in FIELDS if f in data and not isinstance(data[f], str)]
    if bad:
        return jsonify({"success": False, "error": f"Fields must be strings: {', '.join(bad)}"}), 400

    log = NotificationLog()
    controller = _build_controller(log)
    _apply_fields(controller, data)
    notification = controller.submit()

    ok = notification.variant == NORMAL
    return jsonify({"success": ok, "notification": notification.to_dict()}), (201 if ok else 502)
