import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    PORT = int(os.getenv('PORT', '3000'))

    # Database
    DATABASE_PATH = os.getenv('DATABASE_PATH', 'svoz.db')
    SQLALCHEMY_DATABASE_URI = f"sqlite:///{DATABASE_PATH}"

    # Resend
    RESEND_API_KEY = os.getenv('RESEND_API_KEY', '')
    EMAIL_FROM = os.getenv('EMAIL_FROM', 'onboarding@resend.dev')
    EMAIL_TO = [a.strip() for a in os.getenv('EMAIL_TO', '').split(',') if a.strip()]
    EMAIL_ENABLED = os.getenv('EMAIL_ENABLED', 'false').lower() == 'true'

    # Scheduler - daily schedule update
    UPDATE_HOUR = int(os.getenv('UPDATE_HOUR', '6'))  # 6:30am by default
    UPDATE_MINUTE = int(os.getenv('UPDATE_MINUTE', '30'))

    # Collection rules (fixed, not configurable at runtime)
    PAPIR_ANCHOR = '2025-10-15'
    PAPIR_INTERVAL_DAYS = 28

    PLASTY_ANCHOR = '2025-10-06'
    PLASTY_INTERVAL_DAYS = 21

    BIO_WEEKDAY = 'friday'
    BIO_SEASON_START = '03-01'
    BIO_SEASON_END = '11-30'
    BIO_OFF_SEASON_INTERVAL_DAYS = 21

    KOMUNAL_WEEKDAY = 'monday'
    KOMUNAL_SWITCH_DATE = '2025-09-29'
    KOMUNAL_POST_SWITCH_INTERVAL_DAYS = 14
