from flask import jsonify
from contentstore.extensions import mongo
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        collections = mongo.collections
    except RuntimeError:
        return jsonify({
            "status": "unprovisioned",
            "service": "contentstore",
            "collections": []
        }), 503

    return jsonify({
        "status": "ok",
        "service": "contentstore",
        "collections": [
            {"name": name, "collection": handle.name}
            for name, handle in collections.items()
        ]
    })
