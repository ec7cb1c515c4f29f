import logging

from flask import Flask, jsonify, request

from passgauge.config import load_config
from passgauge.presenter import LABELS
from passgauge.wordlist import build_analyzer

logger = logging.getLogger(__name__)


def create_app(analyzer=None):
    app = Flask(__name__)
    if analyzer is None:
        analyzer = build_analyzer(load_config().get("wordlist_path"))
    app.config["ANALYZER"] = analyzer

    @app.route('/')
    def home():
        return jsonify({
            "message": "PassGauge API is running"
        })

    @app.route('/analyze', methods=['POST'])
    def analyze_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({'error': 'expected a JSON object'}), 400
        password = data.get('password', '')
        if not isinstance(password, str):
            logger.info("Rejected /analyze request with non-string password")
            return jsonify({'error': "'password' must be a string"}), 400
        report = app.config["ANALYZER"].analyze(password)
        result = report.to_dict()
        result['label'] = LABELS[report.strength]
        return jsonify(result)

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False)
