"""
Recruit Portal - Application Factory
"""

import logging

import click
from flask import Flask
from config import config

logger = logging.getLogger(__name__)


def create_app(config_name='development', backend=None):
    """
    Factory function that builds the Flask application.

    Args:
        config_name: key of the ``config`` mapping
        backend: object implementing the backend gateway interface; the
            Supabase extension is used when omitted
    """

    app = Flask(__name__)

    # Loads settings
    app.config.from_object(config.get(config_name, config['default']))

    _configure_logging(app)

    # Initializes extensions
    from app.extensions import login_manager, backend as supabase_backend

    if backend is None:
        supabase_backend.init_app(app)
    else:
        app.extensions['backend'] = backend
    login_manager.init_app(app)

    # User loader for Flask-Login
    from app.services.auth import get_user
    from app.services.supabase import BackendError

    @login_manager.user_loader
    def load_user(user_id):
        try:
            return get_user(app.extensions['backend'], user_id)
        except BackendError as e:
            logger.error('Could not restore session user %s: %s', user_id, e)
            return None

    # Registers Blueprints
    from app.routes.auth import auth_bp
    from app.routes.main import main_bp
    from app.routes.join import join_bp
    from app.routes.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(join_bp, url_prefix='/join')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    _register_commands(app)

    # Probes and seeds the backend tables
    if app.config.get('SEED_ON_STARTUP'):
        _seed_database(app)

    return app


def _configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    app.logger.setLevel(level)


def _seed_database(app):
    """Runs the seed check; a failure is logged and the app still starts."""
    from app.services.seed import initialize_database
    from app.services.supabase import BackendError

    try:
        created = initialize_database(app.extensions['backend'])
    except BackendError as e:
        logger.error('Database initialization failed: %s', e)
        return
    if created:
        logger.info('Database initialized: %s', ', '.join(created))


def _register_commands(app):
    @app.cli.command('seed-db')
    def seed_db():
        """Create missing tables and seed the companies."""
        from app.services.seed import initialize_database
        from app.services.supabase import BackendError

        try:
            created = initialize_database(app.extensions['backend'])
        except BackendError as e:
            raise click.ClickException(str(e)) from e
        if created:
            click.echo(f"✅ Created tables: {', '.join(created)}")
        else:
            click.echo('Tables already exist; nothing to do.')
