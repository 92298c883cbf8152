from flask import jsonify
from storefront.domain.exceptions import ValidationError, NotFoundError

def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        response = jsonify({
            "error": "ValidationError",
            "message": str(error),
            "field": error.field
        })
        response.status_code = 400
        return response

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        response = jsonify({
            "error": "NotFound",
            "message": str(error)
        })
        response.status_code = 404
        return response
