from flask import Blueprint, jsonify, request, current_app

from arcade.services.scores.errors import InternalError, MalformedPayload, SubmissionError
from arcade.services.scores.leaderboard import clamp_limit, top_entries
from arcade.services.scores.submission import submit_score as svc_submit_score


scores = Blueprint('scores', __name__)


@scores.route('/submit', methods=['POST'])
def submit_score():
    data = request.get_json(silent=True)
    try:
        if not isinstance(data, dict):
            raise MalformedPayload()
        entry = svc_submit_score(data)
    except SubmissionError as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception:
        # Never leak internals to the caller
        current_app.logger.exception('[score-submit-error] unexpected error in submit-score')
        return jsonify(InternalError().to_dict()), 500
    return jsonify({'success': True, 'data': entry.to_dict()}), 201


@scores.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    limit = clamp_limit(request.args.get('limit'), int(current_app.config.get('LEADERBOARD_DEFAULT_LIMIT', 10)))
    try:
        entries = top_entries(limit)
    except Exception:
        current_app.logger.exception('[leaderboard-error] failed to load leaderboard')
        return jsonify(InternalError().to_dict()), 500
    return jsonify({'success': True, 'data': entries})
