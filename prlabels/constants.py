import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.path.join(APP_DIR, 'config')
DB_FILE = os.path.join(CONFIG_DIR, 'prlabels.db')
CONFIG_FILE = os.environ.get('PRLABELS_CONFIG_FILE', os.path.join(CONFIG_DIR, 'settings.yaml'))

PRLABELS_DB = 'sqlite:///' + DB_FILE

# Label identity
LABEL_HASH_ALGORITHM = 'sha256'
LABEL_HASH_DELIMITER = '@'
LABEL_HASH_LENGTH = 64

LABEL_NAME_MAX_LENGTH = 255
LABEL_COLOR_MAX_LENGTH = 32

DEFAULT_SETTINGS = {
    "database": {
        "uri": PRLABELS_DB,
        "echo": False,
    },
    "logging": {
        "level": "INFO",
        "format": "console",
        "cache_loggers": True,
    },
}
