#!/usr/bin/env python3
"""
Wordly web server: the dictionary widget as a server-rendered Flask app
"""
import asyncio
from datetime import datetime
from typing import Any, Awaitable

from flask import Flask, Response, jsonify, make_response, redirect, render_template, request
from flask_cors import CORS
from loguru import logger

from clients.dictionary_client import DictionaryClient
from config import config
from controllers.query_controller import QueryController
from utils.errors import DictionaryLookupError, WordNotFoundError
from utils.favorites_store import FavoritesStore
from utils.html_renderer import TEMPLATE_DIR
from utils.logger_setup import setup_logger
from utils.storage import KeyValueStorage


def run_async(coro: Awaitable[Any]) -> Any:
    """Run a coroutine to completion on a fresh event loop"""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def build_controller() -> QueryController:
    """Wire the controller with the configured client and favorites file"""
    favorites = FavoritesStore(KeyValueStorage(config.FAVORITES_FILE))
    controller = QueryController(
        DictionaryClient(),
        favorites,
        dark_mode=config.DEFAULT_THEME == "dark",
    )
    if config.DEFAULT_THEME != "system":
        controller.lock_theme()
    return controller


def create_app(controller: QueryController = None) -> Flask:
    """Create the Flask app around a controller"""
    controller = controller or build_controller()

    app = Flask(__name__, template_folder=TEMPLATE_DIR)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    def page() -> Response:
        response = make_response(render_template("index.html", **controller.page_context()))
        response.headers["Content-Type"] = "text/html; charset=utf-8"
        # Ask browsers to send their colour-scheme preference
        response.headers["Accept-CH"] = "Sec-CH-Prefers-Color-Scheme"
        return response

    @app.route('/', methods=['GET'])
    def index():
        hint = request.headers.get("Sec-CH-Prefers-Color-Scheme")
        if hint:
            controller.resolve_theme(hint.strip('"').lower() == "dark")
        return page()

    @app.route('/search', methods=['POST'])
    def search():
        run_async(controller.submit(request.form.get('q', '')))
        return page()

    @app.route('/favorites/toggle', methods=['POST'])
    def toggle_favorite():
        controller.toggle_favorite()
        return page()

    @app.route('/favorites/open', methods=['POST'])
    def open_favorite():
        run_async(controller.open_favorite(request.form.get('word', '')))
        return page()

    @app.route('/favorites/remove', methods=['POST'])
    def remove_favorite():
        controller.remove_favorite(request.form.get('word', ''))
        return page()

    @app.route('/favorites/clear', methods=['POST'])
    def clear_favorites():
        controller.clear_favorites()
        return page()

    @app.route('/audio', methods=['GET'])
    def play_audio():
        clip = run_async(controller.play_audio())
        if clip is None:
            return redirect('/')
        return Response(clip.content, mimetype=clip.content_type)

    @app.route('/theme', methods=['POST'])
    def toggle_theme():
        controller.toggle_theme()
        return page()

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'service': 'wordly',
            'clients': {
                controller.client.name: controller.client.get_description(),
                controller.audio_client.name: controller.audio_client.get_description(),
            },
            'favorites': len(controller.favorites),
        })

    @app.route('/api/favorites', methods=['GET'])
    def list_favorites():
        return jsonify({'favorites': controller.favorites.words()})

    @app.route('/api/lookup/<word>', methods=['GET'])
    def lookup_word(word: str):
        word = word.strip().lower()
        if not word:
            return jsonify({'error': 'Please enter a word to search.', 'success': False}), 400
        try:
            entries = run_async(controller.client.lookup(word))
        except DictionaryLookupError as e:
            status = 404 if isinstance(e, WordNotFoundError) else 502
            return jsonify({'error': e.message, 'kind': e.kind, 'success': False}), status
        return jsonify({
            'word': word,
            'entries': [entry.to_dict() for entry in entries],
            'saved': controller.favorites.is_favorite(entries[0].word if entries else word),
            'success': True,
        })

    return app


def main():
    setup_logger()
    config.validate()
    logger.info("Starting Wordly server...")

    app = create_app()
    logger.info(f"Serving on {config.HOST}:{config.PORT}")
    # One request at a time: UI events are handled on a single logical thread
    app.run(host=config.HOST, port=config.PORT, debug=False, threaded=False)


if __name__ == '__main__':
    main()
