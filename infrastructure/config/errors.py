# infrastructure/config/errors.py
class ConfigLoadError(Exception):
    pass
