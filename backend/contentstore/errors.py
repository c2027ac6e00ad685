from flask import jsonify
from pymongo.errors import PyMongoError
from contentstore.db.errors import is_unique_error, error_code

def register_error_handlers(app):
    @app.errorhandler(PyMongoError)
    def handle_database_error(error):
        if is_unique_error(error):
            response = jsonify({
                "error": "UniqueConflict",
                "message": "A record with this unique key already exists"
            })
            response.status_code = 409
            return response

        app.logger.error("Database error (code=%s): %s", error_code(error), error)
        response = jsonify({
            "error": "DatabaseError",
            "code": error_code(error)
        })
        response.status_code = 503
        return response
