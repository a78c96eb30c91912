from flask import current_app, jsonify, abort

EMPTY_AS_NOT_FOUND = 'not_found'
EMPTY_AS_LIST = 'empty'


def listing_response(items):
    """Serialize a listing, applying the configured empty-result policy."""
    policy = current_app.config.get('EMPTY_RESULT_POLICY', EMPTY_AS_NOT_FOUND)
    if not items and policy != EMPTY_AS_LIST:
        abort(404, description='No matching records found')

    return jsonify([item.to_dict() for item in items])
