from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Settings
from .controllers.bicycles import bp as bicycles_bp
from .controllers.rentals import bp as rentals_bp
from .controllers.users import bp as users_bp
from .models.store import Store
from .services.common import EXTENSION_KEY, build_services
from .utils.logging_config import setup_logging


def create_app(settings=None, store=None, ids=None, clock=None):
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["SETTINGS"] = settings

    store = store if store is not None else Store(settings.data_path)
    app.extensions[EXTENSION_KEY] = build_services(store, ids=ids, clock=clock)

    app.register_blueprint(users_bp)
    app.register_blueprint(bicycles_bp)
    app.register_blueprint(rentals_bp)

    @app.errorhandler(HTTPException)
    def http_error(e):
        body = {"error": e.name.lower().replace(" ", "_"), "message": e.description}
        return jsonify(body), e.code

    return app
