import os
import logging

class Config:
    """Base configuration"""
    PREVIEW_WIDTH = 64
    PREVIEW_HEIGHT = 64
    CUBE_FACE_WIDTH = 32
    TARGET_FPS = 30
    JPEG_QUALITY = 85
    ANIMATION_RATE = 0.00005  # knob units per millisecond
    LOG_LEVEL = 'INFO'
    DEBUG = False
    TESTING = False

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    PREVIEW_WIDTH = 128
    PREVIEW_HEIGHT = 128
    CUBE_FACE_WIDTH = 64

    def __init__(self):
        self.LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING').upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.LOG_LEVEL!r}")

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True
    PREVIEW_WIDTH = 8
    PREVIEW_HEIGHT = 6
    CUBE_FACE_WIDTH = 4

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Instantiate the configuration selected by name or PATTERN_ENV"""
    if config_name is None:
        config_name = os.environ.get('PATTERN_ENV', 'default')
    return config[config_name]()

def configure_logging(cfg):
    """Apply the configured log level to the root logger"""
    logging.basicConfig(
        level=cfg.LOG_LEVEL,
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )
