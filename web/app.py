"""Word ladder web application: Flask JSON backend."""
from __future__ import annotations

import random
import sys
import uuid
from pathlib import Path

# Ensure project root is on sys.path so `ladder.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from ladder.constants import MAX_DISTANCE, MIN_DISTANCE
from ladder.dictionary import Dictionary, load_default_dictionary
from ladder.graph import find_shortest_path
from ladder.session import LadderSession, new_session

app = Flask(__name__)
app.config.setdefault("LADDER_MIN_DIST", MIN_DISTANCE)
app.config.setdefault("LADDER_MAX_DIST", MAX_DISTANCE)
app.config.setdefault("LADDER_SEED", None)
app.config.setdefault("LADDER_DICTIONARY", None)

# Game state keyed by session UUID
GAMES: dict[str, LadderSession] = {}


def _dictionary() -> Dictionary:
    """Dictionary from app config, loading the bundled lists on first use."""
    d = app.config["LADDER_DICTIONARY"]
    if d is None:
        d = load_default_dictionary()
        app.config["LADDER_DICTIONARY"] = d
        app.logger.info("Dictionary loaded: %d words", d.word_count)
    return d


def _rng() -> random.Random:
    rng = app.extensions.get("ladder_rng")
    if rng is None:
        rng = random.Random(app.config["LADDER_SEED"])
        app.extensions["ladder_rng"] = rng
    return rng


def _lookup_session(data: dict) -> tuple[str, LadderSession | None]:
    session_id = data.get("session_id", "")
    return session_id, GAMES.get(session_id)


def session_to_json(session_id: str, session: LadderSession) -> dict:
    result = session.to_dict()
    result["session_id"] = session_id
    return result


@app.route("/new", methods=["POST"])
def new_game():
    data = request.get_json(silent=True) or {}
    # Replacing a session discards the old puzzle entirely
    old_id = data.get("session_id")
    if old_id:
        GAMES.pop(old_id, None)

    session = new_session(
        _dictionary(),
        min_dist=int(app.config["LADDER_MIN_DIST"]),
        max_dist=int(app.config["LADDER_MAX_DIST"]),
        rng=_rng(),
    )
    session_id = str(uuid.uuid4())
    GAMES[session_id] = session
    app.logger.info("New puzzle %s -> %s (%s)",
                    session.start_word, session.target_word, session_id)
    return jsonify(session_to_json(session_id, session))


@app.route("/state/<session_id>", methods=["GET"])
def state(session_id: str):
    session = GAMES.get(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    return jsonify(session_to_json(session_id, session))


@app.route("/input", methods=["POST"])
def set_input():
    data = request.get_json(silent=True) or {}
    session_id, session = _lookup_session(data)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    text = data.get("text")
    if not isinstance(text, str):
        return jsonify({"error": "Missing 'text'"}), 400

    session.set_row_content(text)
    return jsonify(session_to_json(session_id, session))


@app.route("/submit", methods=["POST"])
def submit():
    data = request.get_json(silent=True) or {}
    session_id, session = _lookup_session(data)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    word = data.get("word")
    if word is not None and not isinstance(word, str):
        return jsonify({"error": "Invalid 'word'"}), 400

    outcome = session.submit_row(word)
    result = session_to_json(session_id, session)
    result["accepted"] = outcome.accepted
    return jsonify(result)


@app.route("/hint", methods=["POST"])
def hint():
    data = request.get_json(silent=True) or {}
    session_id, session = _lookup_session(data)
    if session is None:
        return jsonify({"error": "Session not found"}), 404

    word = session.hint()
    result = session_to_json(session_id, session)
    result["hint"] = word
    return jsonify(result)


@app.route("/clear", methods=["POST"])
def clear():
    data = request.get_json(silent=True) or {}
    session_id, session = _lookup_session(data)
    if session is None:
        return jsonify({"error": "Session not found"}), 404

    session.clear_ladder()
    return jsonify(session_to_json(session_id, session))


@app.route("/path", methods=["POST"])
def path():
    data = request.get_json(silent=True) or {}
    start = str(data.get("start", "")).strip().lower()
    target = str(data.get("target", "")).strip().lower()
    if not start or not target:
        return jsonify({"error": "Both 'start' and 'target' are required"}), 400

    dictionary = _dictionary()
    unknown = [w for w in (start, target) if not dictionary.is_valid_word(w)]
    if unknown:
        return jsonify({"error": f"Not in word list: {', '.join(unknown)}"}), 400

    found = find_shortest_path(start, target, dictionary)
    if found is None:
        return jsonify({"path": None, "steps": None})
    return jsonify({"path": found, "steps": len(found) - 1})


if __name__ == "__main__":
    print(f"Dictionary loaded: {_dictionary().word_count} words")
    app.run(debug=True, host="0.0.0.0", port=8080)
