import os
from dotenv import load_dotenv
from flask import Flask, jsonify

from config import load_global_opts_from_env
from constants import TABLE_OPTS_CONFIG_KEY
from error_handler import TableConfigError
from logger import logger
from routes.table_routes import bp as table_bp, init_table_routes

load_dotenv()

SAMPLE_PETS = [
    {'id': 1, 'name': 'Rex', 'species': 'dog', 'age': 7, 'owner': 'Alice'},
    {'id': 2, 'name': 'Whiskers', 'species': 'cat', 'age': 3, 'owner': 'Bob'},
    {'id': 3, 'name': 'Bubbles', 'species': 'fish', 'age': None, 'owner': None},
    {'id': 4, 'name': 'Polly', 'species': 'parrot', 'age': 12, 'owner': 'Alice'},
]

app = Flask(__name__)

# ============================================================================
# FLASK CONFIGURATION
# ============================================================================

app.config['SECRET_KEY'] = os.environ.get('FLASK_SECRET_KEY', 'dev')

# Process-wide table options from TABLE_OPTS; the app keeps its own copy so
# tests can override app.config['TABLE_OPTS'] independently
app.config[TABLE_OPTS_CONFIG_KEY] = load_global_opts_from_env()


@app.errorhandler(TableConfigError)
def handle_table_config_error(e):
    """Misconfigured tables are programmer errors; report them as 500s."""
    logger.error(f"Table configuration error ({e.kind}): {e.message}")
    return jsonify({'error': 'Table configuration error', 'kind': e.kind}), 500


# ============================================================================
# ROUTES
# ============================================================================

init_table_routes(SAMPLE_PETS)
app.register_blueprint(table_bp)


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    logger.info(f"Starting sortable table demo on port {port}")
    app.run(host='0.0.0.0', port=port)
