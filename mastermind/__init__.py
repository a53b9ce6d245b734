from flask import Flask

from .config import Config
from .extensions import cors, init_record_store, sess


def create_app(config_object=Config, record_store=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    # init extensions
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)
    if app.config.get("SESSION_TYPE"):
        sess.init_app(app)
    init_record_store(app, record_store)

    # register blueprints
    from .routes.main import main_bp
    from .routes.registration import registration_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(registration_bp)

    return app
