"""
Shared fixtures: a small Flask upstream served from a background thread.
"""

import threading
import time

import pytest
from flask import Flask, Response, jsonify, request
from werkzeug.serving import make_server


def create_upstream_app():
    app = Flask(__name__)
    app.config['last_request'] = {}

    @app.route('/hello', methods=['GET', 'HEAD'])
    def hello():
        return Response("hello world", mimetype='text/plain')

    @app.route('/unicode', methods=['GET'])
    def unicode_body():
        return Response("héllo ✓", content_type='text/plain; charset=utf-8')

    @app.route('/echo', methods=['POST', 'PUT', 'PATCH', 'DELETE'])
    def echo():
        app.config['last_request'] = {
            'method': request.method,
            'content_type': request.headers.get('Content-Type'),
            'headers': dict(request.headers),
            'body': request.get_data(as_text=True),
        }
        return jsonify({'success': True})

    @app.route('/trickle', methods=['GET'])
    def trickle():
        def generate():
            for _ in range(4):
                time.sleep(0.5)
                yield "x"
        return Response(generate(), mimetype='text/plain')

    @app.route('/missing', methods=['GET'])
    def missing():
        return jsonify({'success': False, 'error': 'Not found'}), 404

    return app


class ServerThread(threading.Thread):
    def __init__(self, app):
        super().__init__(daemon=True)
        self.server = make_server('127.0.0.1', 0, app, threaded=True)
        self.port = self.server.server_port

    def run(self):
        self.server.serve_forever()

    def shutdown(self):
        self.server.shutdown()


@pytest.fixture(scope='session')
def upstream_app():
    return create_upstream_app()


@pytest.fixture(scope='session')
def upstream(upstream_app):
    """Base URL of the running Flask upstream."""
    thread = ServerThread(upstream_app)
    thread.start()
    yield f"http://127.0.0.1:{thread.port}"
    thread.shutdown()
    thread.join(timeout=5)

