from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from news_desk import DeskConfig, NewsDesk

app = Flask(__name__)
_desk: Optional[NewsDesk] = None


def _get_desk() -> NewsDesk:
    """Build the desk from the environment on first use; bad settings raise here."""
    global _desk
    if _desk is None:
        config = DeskConfig.from_env()
        logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        _desk = NewsDesk(config)
    return _desk


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.get("/news")
def fetch_news():
    query = request.args.get("query", "")
    category = request.args.get("type", "")
    try:
        desk = _get_desk()
        articles = desk.search(query=query, category=category)
        response = jsonify({"articles": [desk.to_dict(article) for article in articles]})
    except Exception as exc:
        app.logger.exception("Uncaught exception when handling /news")
        return jsonify({"error": "Failed to fetch news", "details": str(exc)}), 500
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Cache-Control"] = f"public, max-age={desk.config.cache_max_age}"
    return response


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8008)
