import os

# Config is read once at import time, so set the test environment before any
# test module imports the svoz package
os.environ.setdefault('DATABASE_PATH', 'test_svoz.db')
os.environ['EMAIL_ENABLED'] = 'false'
