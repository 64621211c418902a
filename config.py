"""
Recruit Portal - Configuration

IMPORTANT: No backend key or admin password lives in this file.
Everything sensitive is read from environment variables (.env)
"""

import os
from dotenv import load_dotenv

# Loads environment variables from the .env file
load_dotenv()


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# ==============================================================================
# GENERAL SETTINGS
# ==============================================================================

class Config:
    """Base application settings."""

    # Secret key for Flask sessions
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', os.urandom(24).hex())

    # Hosted backend (Supabase project URL and API key)
    SUPABASE_URL = os.getenv('SUPABASE_URL', '')
    SUPABASE_KEY = os.getenv('SUPABASE_KEY', '')

    # Admin panel credentials
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', '')

    # Payment hand-off
    PAYMENT_URL = os.getenv(
        'PAYMENT_URL',
        'https://pay.pesapal.com/iframe/PesapalIframe3/Index',
    )
    ORDER_TRACKING_ID = os.getenv(
        'ORDER_TRACKING_ID',
        '2fc6a799-63b8-452b-9c9a-dc4f11a1f174',
    )
    REDIRECT_DELAY_SECONDS = int(os.getenv('REDIRECT_DELAY_SECONDS', '1'))

    # Probe and seed the backend tables when the app starts
    SEED_ON_STARTUP = _env_flag('SEED_ON_STARTUP', True)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin-secret'
    SEED_ON_STARTUP = False
    REDIRECT_DELAY_SECONDS = 1


class ProductionConfig(Config):
    pass


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
