# Debian-DevEnv-Setup/devenv_setup/__init__.py

__version__ = "0.1.0"
