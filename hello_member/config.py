class Config:
    """
    Default settings. Any key can be overridden with a HELLO_MEMBER_<KEY> environment variable.
    """
    DEBUG = False
    TESTING = False
    LOG_LEVEL = "INFO"
    HELLO_GREETING = "헬로!!!"
    # Path to a JSON file of members registered at startup
    MEMBER_SEED_FILE = None
