"""Static metadata describing Kvizoteka."""

APP_NAME = "Kvizoteka"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Kvizoteka is an interactive multiple-choice quiz built with Qt and FastAPI. "
    "Play it in the desktop window or open the same quiz in a web browser."
)
