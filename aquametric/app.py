import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from aquametric.config import DEFAULT_SECRET_KEY, config
from aquametric.dashboard.api.pond_routes import pond_bp
from aquametric.dashboard.services.pond_store import AppState, PondStore, load_state
from aquametric.utils.timezone_utils import now_in_timezone

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(state: Optional[AppState] = None) -> Flask:
    """
    Create the Flask app serving the pond API.

    Args:
        state: Initial pond data; defaults to the snapshot at config.STATE_FILE
    """
    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.SECRET_KEY
    if config.is_production and config.SECRET_KEY == DEFAULT_SECRET_KEY:
        logger.warning("⚠️ SECRET_KEY is not set for the production environment")

    if state is None:
        state = load_state(config.get_state_path())
    app.extensions['pond_store'] = PondStore(state)

    # Register pond blueprint
    app.register_blueprint(pond_bp)

    CORS(app, origins=config.ALLOWED_ORIGINS,
         allow_headers=['Content-Type', 'Authorization'],
         methods=['GET', 'POST', 'OPTIONS'])

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'ok',
            'ponds': len(app.extensions['pond_store'].list_ponds()),
            'time': now_in_timezone().isoformat()
        })

    logger.info(f"🚀 AquaMetric app created with {len(state.ponds)} ponds")
    return app


if __name__ == '__main__':
    app = create_app()
    # Configure for production vs development
    if config.is_production:
        app.run(host=config.HOST, port=config.PORT, debug=False)
    else:
        app.run(host=config.HOST, port=config.PORT, debug=config.FLASK_DEBUG)
