import logging

import click
from flask import Flask, request
from app.extensions import db, login_manager
from app.logging_config import configure_logging
from config import Config

logger = logging.getLogger(__name__)

PROFILE_HEADER = 'profile_id'


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    from app.models import Profile
    from app.errors import error_response, register_error_handlers

    # Profile resolution for Flask-Login: the header names the acting profile
    @login_manager.request_loader
    def load_profile_from_request(req):
        raw_id = req.headers.get(PROFILE_HEADER)
        if not raw_id:
            return None
        try:
            profile_id = int(raw_id)
        except ValueError:
            return None
        return db.session.get(Profile, profile_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        logger.warning("Unauthenticated request to %s", request.path)
        return error_response(401, 'Unauthorized')

    register_error_handlers(app)

    # Register blueprints
    from app.routes.contracts import contracts_bp
    from app.routes.jobs import jobs_bp
    from app.routes.balances import balances_bp
    from app.routes.admin import admin_bp

    app.register_blueprint(contracts_bp)
    app.register_blueprint(jobs_bp)
    app.register_blueprint(balances_bp)
    app.register_blueprint(admin_bp)

    @app.cli.command('seed-db')
    def seed_db_command():
        """Drop, recreate and fill the tables with demo data."""
        from app.seed import seed_database
        seed_database(db.session, reset=True)
        click.echo('Database seeded.')

    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
