import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'ashura-games-secret-key'
    # Default is an in-memory database; point DATABASE_URL at a real one for durability
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # bcrypt cost factor (never below 10 outside tests)
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '10'))
    # Bearer token lifetime (seconds), 7 days
    TOKEN_TTL_SEC = int(os.environ.get('TOKEN_TTL_SEC', str(7 * 24 * 60 * 60)))
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '10'))
    # Seeded administrator account
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@ashura.games')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')
    # Create tables and seed admin + catalog when the app is built
    SEED_ON_STARTUP = os.environ.get('SEED_ON_STARTUP', '1').strip().lower() in {'1', 'true', 'yes', 'on'}
