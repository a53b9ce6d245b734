"""
Main routes: the landing page and a health check.
"""
from flask import Blueprint, jsonify, render_template, session

from mastermind import content
from mastermind.services.registration import RegistrationFormState

main_bp = Blueprint("main", __name__)

FORM_SESSION_KEY = "registration_form"


@main_bp.get("/")
def home():
    """Render the landing page with whatever the visitor last typed."""
    form = RegistrationFormState.from_dict(session.get(FORM_SESSION_KEY))
    return render_template(
        "home.html",
        form=form,
        event=content.EVENT,
        form_copy=content.FORM,
        features=content.FEATURES,
        urgency=content.URGENCY,
    )


@main_bp.get("/health")
def health():
    return jsonify({"status": "ok"}), 200
