from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="wX4nB7qJc2mRzS9vT1kLp8dH3fG6yE0aU5oI2rQ7tN4jM1xC8bV6zK3hP9sD0lF",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]  # noqa: S104

# Surface raw store errors while developing.
API_EXPOSE_STORE_ERRORS = env.bool("API_EXPOSE_STORE_ERRORS", default=True)
