from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from promising_news import AppConfig, HeadlineIngestor, NewsService
from promising_news.errors import HeadlineFetchError, NewsServiceError, StoreError
from promising_news.providers import BaseProvider, NewsAPIProvider
from promising_news.query import NewsQuery
from promising_news.store import MongoNewsStore, NewsStore

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Promising News API"


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[NewsStore] = None,
    provider: Optional[BaseProvider] = None,
) -> Flask:
    config = config or AppConfig.from_env()
    if store is None:
        store = MongoNewsStore.from_url(config.connection_url)
        store.ensure_indexes()
    if provider is None and config.newsapi_key:
        provider = NewsAPIProvider(
            config.newsapi_key,
            country=config.headline_country,
            language=config.headline_language,
            page_size=config.headline_page_size,
        )

    app = Flask(__name__)
    CORS(app)
    service = NewsService(store)
    app.config["NEWS_CONFIG"] = config
    app.extensions["news_service"] = service

    @app.errorhandler(NewsServiceError)
    def handle_service_error(exc: NewsServiceError):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        app.logger.exception("Uncaught exception when handling %s", request.path)
        return jsonify({"message": "Unexpected server error", "detail": str(exc)}), 500

    @app.get("/")
    def welcome():
        return WELCOME_TEXT

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    @app.get("/news")
    def list_news():
        query = NewsQuery.from_args(request.args)
        entries = service.list_entries(query)
        return jsonify({"data": [entry.to_dict() for entry in entries], "totalResults": len(entries)})

    @app.route("/news/update", methods=["GET", "POST"])
    def update_headlines():
        if provider is None:
            raise HeadlineFetchError("Headline provider is not configured; set NEWSAPI_KEY")
        report = HeadlineIngestor(service, provider).run()
        return jsonify(report.to_dict())

    @app.get("/news/<entry_id>")
    def get_news_entry(entry_id: str):
        return jsonify(service.get_entry(entry_id).to_dict())

    @app.post("/news")
    def create_news_entry():
        entry = service.create_entry(_json_body())
        return jsonify(entry.to_dict()), 201

    @app.route("/news/<entry_id>", methods=["PATCH", "PUT"])
    def update_news_entry(entry_id: str):
        return jsonify(service.update_entry(entry_id, _json_body()).to_dict())

    @app.delete("/news/<entry_id>")
    def delete_news_entry(entry_id: str):
        return jsonify(service.delete_entry(entry_id))

    return app


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def main() -> None:
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    config = AppConfig.from_env()
    store = MongoNewsStore.from_url(config.connection_url)
    try:
        store.ping()
    except StoreError as exc:
        logger.error("%s, did not connect", exc.message)
        raise SystemExit(1) from exc
    store.ensure_indexes()
    app = create_app(config, store=store)
    logger.info("Server Running on Port: %s", config.port)
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
